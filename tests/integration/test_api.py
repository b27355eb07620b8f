"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from word_search.main import app
from word_search.service_instance import search_service, word_store


class TestAPI:
    """Integration tests for API endpoints."""
    
    @pytest.fixture
    def sample_words(self):
        """Sample words for testing."""
        return ["apple", "application", "banana", "Cherry"]
    
    @pytest.fixture
    def client(self, sample_words):
        """Create a test client over a freshly loaded store."""
        with TestClient(app) as client:
            word_store.clear()
            word_store.load_words(sample_words)
            search_service.reset_stats()
            yield client
    
    def test_welcome_endpoint(self, client):
        """Test the welcome endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        
        data = response.json()
        assert data["name"] == "Word Search"
        assert data["search_form"] == {"action": "/search", "method": "GET", "field": "keyword"}
    
    def test_list_words(self, client, sample_words):
        """Test listing every stored word."""
        response = client.get("/words")
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_words"] == len(sample_words)
        assert [w["name"] for w in data["words"]] == sample_words
        assert [w["id"] for w in data["words"]] == [1, 2, 3, 4]
    
    def test_show_word(self, client):
        """Test showing a single word."""
        response = client.get("/words/3")
        assert response.status_code == 200
        
        data = response.json()
        assert data["id"] == 3
        assert data["name"] == "banana"
        assert "created_at" in data
        assert "updated_at" in data
    
    def test_show_word_not_found(self, client):
        """Test the not-found response for an unknown id."""
        response = client.get("/words/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Word 999 not found"
    
    def test_search_multiple_results(self, client):
        """Test a keyword with several matches lists them in order."""
        response = client.get("/search", params={"keyword": "app"}, follow_redirects=False)
        assert response.status_code == 200
        
        data = response.json()
        assert data["exact_match"] is False
        assert data["total_results"] == 2
        assert [w["name"] for w in data["results"]] == ["apple", "application"]
        assert data["message"] is None
    
    def test_search_exact_match_redirects(self, client):
        """Test that an exact keyword redirects to the word page."""
        response = client.get("/search", params={"keyword": "apple"}, follow_redirects=False)
        
        assert response.status_code == 302
        assert response.headers["location"] == "/words/1"
    
    def test_search_redirect_is_followed(self, client):
        """Test following the redirect lands on the word."""
        response = client.get("/search", params={"keyword": "apple"})
        
        assert response.status_code == 200
        assert response.json()["name"] == "apple"
    
    def test_search_single_match_redirects(self, client):
        """Test that a single case-insensitive match redirects."""
        response = client.get("/search", params={"keyword": "cherry"}, follow_redirects=False)
        
        assert response.status_code == 302
        assert response.headers["location"] == "/words/4"
    
    def test_search_no_results(self, client):
        """Test the no-results message."""
        response = client.get("/search", params={"keyword": "xyz"}, follow_redirects=False)
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_results"] == 0
        assert data["results"] == []
        assert data["message"] == "No results found for 'xyz'"
    
    def test_search_without_keyword(self, client, sample_words):
        """Test that a missing keyword lists every word."""
        response = client.get("/search", follow_redirects=False)
        assert response.status_code == 200
        
        data = response.json()
        assert data["keyword"] == ""
        assert [w["name"] for w in data["results"]] == sample_words
    
    def test_search_empty_keyword(self, client, sample_words):
        """Test that an empty keyword lists every word."""
        response = client.get("/search?keyword=", follow_redirects=False)
        assert response.status_code == 200
        assert response.json()["total_results"] == len(sample_words)
    
    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["dependencies"]["word_store"] == "healthy"
    
    def test_health_degraded_when_empty(self, client):
        """Test that an empty store reports degraded health."""
        word_store.clear()
        
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
    
    def test_readiness_check(self, client):
        """Test readiness probe reports statistics."""
        client.get("/search", params={"keyword": "app"}, follow_redirects=False)
        
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        
        data = response.json()
        assert data["status"] == "ready"
        assert data["store_stats"]["total_words"] == 4
        assert data["search_stats"]["multiple_matches"] == 1
    
    def test_liveness_check(self, client):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"
