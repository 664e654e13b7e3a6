"""Tests for the stats route."""

from fastapi.testclient import TestClient

from tests.support.helpers import caller_headers


class TestStatsRoute:
    """Tests for GET /api/stats."""

    def test_empty_registry(self, initialized_client: TestClient) -> None:
        response = initialized_client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {
            "total_investments": 0,
            "total_amount": 0,
            "completed_investments": 0,
        }

    def test_counts_all_and_completed(
        self,
        initialized_client: TestClient,
        admin_address: str,
        buyer_address: str,
        other_address: str,
    ) -> None:
        """
        Given: Investments of 50_000_000 and 75_000_000, the first completed
        When: GET /api/stats
        Then: 2 investments, 125_000_000 total, 1 completed
        """
        for buyer, amount in ((buyer_address, 50_000_000), (other_address, 75_000_000)):
            initialized_client.post(
                "/api/investments",
                json={"buyer": buyer, "token_id": "EVCHARGER001", "amount": amount},
            )
        initialized_client.patch(
            "/api/investments/1/status",
            json={"status": "completed"},
            headers=caller_headers(admin_address),
        )

        response = initialized_client.get("/api/stats")

        assert response.json() == {
            "total_investments": 2,
            "total_amount": 125_000_000,
            "completed_investments": 1,
        }
