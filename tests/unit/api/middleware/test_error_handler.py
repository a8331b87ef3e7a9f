"""
Tests for lexdesk/api/middleware/error_handler.py
"""

from unittest.mock import patch

from lexdesk.core.exceptions import InvalidArgumentError


class TestErrorHandlerMiddleware:
    """Tests for mapping exceptions to responses."""

    def test_lexdesk_exception_maps_to_400(self, test_client, qa_pipeline):
        """Test that application errors return their code and details."""
        with patch.object(qa_pipeline, "search", side_effect=InvalidArgumentError("preset", "unknown")):
            response = test_client.post("/api/v1/search", json={"query": "supply"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "INVALID_ARGUMENT"
        assert data["details"] == {"argument": "preset", "reason": "unknown"}

    def test_not_found_maps_to_404(self, test_client):
        """Test that missing documents return 404."""
        response = test_client.delete("/api/v1/documents/doc-404")

        assert response.status_code == 404
        assert response.json()["details"] == {"document_id": "doc-404"}

    def test_unexpected_exception_maps_to_500(self, test_client, qa_pipeline):
        """Test that unexpected errors return a generic body."""
        with patch.object(qa_pipeline, "search", side_effect=RuntimeError("boom")):
            response = test_client.post("/api/v1/search", json={"query": "supply"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
        }
