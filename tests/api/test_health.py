"""Health Probe — liveness always 200, catalog state reported."""

from demo_api import SERVICE_NAME, __version__


async def test_health_reports_ready_catalog(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "demo-api",
        "version": __version__,
        "catalog": "ready",
    }


async def test_health_is_200_without_catalog(cold_client):
    res = await cold_client.get("/health")
    assert res.status_code == 200
    assert res.json()["catalog"] == "not_ready"


def test_service_name_matches_distribution_name():
    assert SERVICE_NAME == "demo-api"
