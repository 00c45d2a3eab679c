"""Request size limit and health check."""

from fastapi.testclient import TestClient

from amm_pool import __version__
from amm_pool.api.main import MAX_REQUEST_SIZE, app

client = TestClient(app)


def test_body_over_limit_is_rejected():
    result = client.post(
        "/deposit",
        json={"caller": "0x" + "00" * 20, "value": "1"},
        headers={"Content-Length": str(MAX_REQUEST_SIZE + 1)},
    )

    assert result.status_code == 413
    assert result.json() == {"detail": "Request too large"}


def test_health_reports_version():
    result = client.get("/health")

    assert result.status_code == 200
    assert result.json() == {"status": "ok", "version": __version__}
