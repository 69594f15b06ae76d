import pytest

from clubhub.obs import health


@pytest.mark.asyncio
async def test_liveness(api_client):
	for path in ("/health", "/health/live"):
		response = await api_client.get(path)
		assert response.status_code == 200
		assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_readiness_degraded_without_postgres(api_client, monkeypatch):
	async def fake_postgres_status(timeout: float = 0.3):
		return ({"ok": False, "error": "down"}, None)

	monkeypatch.setattr(health, "_postgres_status", fake_postgres_status)

	response = await api_client.get("/health/ready")
	assert response.status_code == 503
	payload = response.json()
	assert payload["status"] == "degraded"
	assert payload["checks"]["migrations"] == {"ok": False, "error": "pool_unavailable"}


@pytest.mark.asyncio
async def test_metrics_exposes_seed_counters(api_client):
	await api_client.get("/health")
	response = await api_client.get("/metrics")
	assert response.status_code == 200
	body = response.text
	assert "clubhub_http_requests_total" in body
	assert "clubhub_seed_runs_total" in body
