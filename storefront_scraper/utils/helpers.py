from typing import Any, List


def normalize_domain(domain: str) -> str:
    """Strip a leading protocol and "www." from a store domain.

    Strips at most one protocol prefix and at most one "www." prefix, from
    the front only. A bare host such as "example.com" is returned unchanged.
    """
    for prefixes in (("http://", "https://"), ("www.",)):
        for prefix in prefixes:
            if domain.startswith(prefix):
                domain = domain[len(prefix):]
                break
    return domain


def parse_tags(value: Any) -> List[str]:
    """Parse a tags field which may be a space-delimited string or a list of strings.
    - None / missing -> []
    - "red blue green" -> ["red", "blue", "green"]
    - ["red", "blue"] -> unchanged
    Anything else raises ValueError.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        if not all(isinstance(tag, str) for tag in value):
            raise ValueError("tags list must contain only strings")
        return list(value)
    raise ValueError(f"tags must be a string or a list of strings, got {type(value).__name__}")
