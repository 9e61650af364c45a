def test_health_check(client):
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    body = r.json()
    assert body.get("status") == "healthy"


def test_test_connection(client):
    r = client.get("/api/v1/test-connection", params={"domain": "example.com"})
    assert r.status_code == 200
    body = r.json()
    assert body.get("storefront") == "connected"


def test_test_connection_requires_domain(client):
    r = client.get("/api/v1/test-connection")
    assert r.status_code == 422
