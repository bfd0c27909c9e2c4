import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    """The health check reports the running version."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "0.1.0"}


@pytest.mark.asyncio
async def test_root_endpoint(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Welcome to the Wedding Party RSVP API"
