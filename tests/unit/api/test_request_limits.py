"""Tests for API request size limits and the health endpoint."""

from fastapi.testclient import TestClient

from yield_optimizer.api.main import MAX_REQUEST_SIZE, app
from yield_optimizer.constants import (
    MATH_LIB_PRECOMPILE_ADDRESS,
    YIELD_OPTIMIZER_PRECOMPILE_ADDRESS,
)


class TestRequestSizeLimits:
    """Request body size limit."""

    def test_oversized_request_returns_413(self):
        """Request with Content-Length exceeding limit returns 413."""
        client = TestClient(app)
        response = client.post(
            f"/precompiles/{MATH_LIB_PRECOMPILE_ADDRESS}",
            json={"input": "0x"},
            headers={"Content-Length": str(MAX_REQUEST_SIZE + 1)},
        )
        assert response.status_code == 413
        assert response.json()["detail"] == "Request too large"

    def test_normal_request_accepted(self):
        """Normal-sized request is accepted."""
        client = TestClient(app)
        response = client.post(
            f"/precompiles/{MATH_LIB_PRECOMPILE_ADDRESS}",
            json={"input": "0x"},
        )
        assert response.status_code == 200


class TestHealthEndpoint:
    def test_health_returns_ok(self):
        """Health endpoint returns ok status."""
        client = TestClient(app)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_lists_precompiles(self):
        client = TestClient(app)
        data = client.get("/health").json()
        assert set(data["precompiles"]) == {
            MATH_LIB_PRECOMPILE_ADDRESS,
            YIELD_OPTIMIZER_PRECOMPILE_ADDRESS,
        }
