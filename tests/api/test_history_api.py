"""
API Integration Tests for History Endpoints
"""

import pytest


class TestHistoryAPI:
    """Integration tests for history API endpoints"""

    @pytest.fixture
    def setup_history(self, client):
        """Create some codec history"""
        ids = []
        for text in ["a b", "c/d"]:
            response = client.post("/api/codec/url_encode", json={"text": text})
            ids.append(response.json()["history_id"])

        response = client.post("/api/codec/base64_encode", json={"text": "hi"})
        ids.append(response.json()["history_id"])

        return ids

    def test_get_recent_history(self, client, setup_history):
        """Test getting recent history, newest first"""
        response = client.get("/api/history/recent")

        assert response.status_code == 200
        data = response.json()

        assert "records" in data
        assert [r["id"] for r in data["records"]] == list(reversed(setup_history))

        # Check structure of a record
        record = data["records"][0]
        assert record["operation"] == "base64_encode"
        assert record["input"] == "hi"
        assert record["output"] == "aGk="
        assert "timestamp" in record

    def test_get_recent_history_with_limit(self, client, setup_history):
        """Test getting limited number of records"""
        response = client.get("/api/history/recent?limit=2")

        assert response.status_code == 200
        assert len(response.json()["records"]) == 2

    def test_get_recent_history_invalid_limit(self, client):
        response = client.get("/api/history/recent?limit=0")

        assert response.status_code == 422

    def test_filter_by_operation(self, client, setup_history):
        response = client.get("/api/history/recent?operation=url_encode")

        assert response.status_code == 200
        records = response.json()["records"]
        assert len(records) == 2
        assert {r["output"] for r in records} == {"a%20b", "c%2Fd"}

    def test_filter_by_unknown_operation(self, client):
        response = client.get("/api/history/recent?operation=rot13")

        assert response.status_code == 422

    def test_get_statistics(self, client, setup_history):
        """Test getting history statistics"""
        response = client.get("/api/history/statistics")

        assert response.status_code == 200
        stats = response.json()

        assert stats["total"] == 3
        assert stats["buffer_usage"] == 3
        assert stats["buffer_max"] == 5
        assert stats["by_operation"] == {"url_encode": 2, "base64_encode": 1}

    def test_get_record(self, client, setup_history):
        response = client.get(f"/api/history/{setup_history[0]}")

        assert response.status_code == 200
        assert response.json()["input"] == "a b"

    def test_get_missing_record(self, client):
        response = client.get("/api/history/hist_missing")

        assert response.status_code == 404
        assert "hist_missing" in response.json()["detail"]

    def test_delete_record(self, client, setup_history):
        record_id = setup_history[1]

        response = client.delete(f"/api/history/{record_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "id": record_id}
        assert client.get(f"/api/history/{record_id}").status_code == 404
        assert len(client.get("/api/history/recent").json()["records"]) == 2

    def test_delete_missing_record(self, client):
        response = client.delete("/api/history/hist_missing")

        assert response.status_code == 404

    def test_clear_history(self, client, setup_history):
        """Test clearing history"""
        response = client.post("/api/history/clear")

        assert response.status_code == 200
        assert response.json()["success"] is True

        # Verify history is cleared
        data = client.get("/api/history/recent").json()
        assert data["records"] == []
        assert data["statistics"]["total"] == 0

    def test_export_history(self, client, setup_history):
        response = client.get("/api/history/export")

        assert response.status_code == 200
        data = response.json()
        assert [r["id"] for r in data["records"]] == list(reversed(setup_history))
        assert data["statistics"]["total"] == 3

    def test_buffer_evicts_oldest(self, client):
        """Buffer holds at most buffer_size records"""
        ids = [
            client.post("/api/codec/html_encode", json={"text": str(i)}).json()["history_id"]
            for i in range(7)
        ]

        records = client.get("/api/history/recent?limit=100").json()["records"]

        assert [r["id"] for r in records] == list(reversed(ids[2:]))
        assert client.get(f"/api/history/{ids[0]}").status_code == 404

    def test_failed_codec_not_recorded(self, client):
        """Rejected input leaves history untouched"""
        response = client.post("/api/codec/base64_decode", json={"text": "!!!!"})

        assert response.status_code == 422
        assert client.get("/api/history/statistics").json()["total"] == 0
