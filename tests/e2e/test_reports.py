"""End-to-end tests for reports, articles and health checks."""

import asyncio
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from guard.domain.model import Article
from guard.domain.repository import ArticleRepository
from guard.domain.value import ArticleId
from guard.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import resolve


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client."""
    return TestClient(create_app(container))


class TestReports:
    """Tests for /api/reports."""

    def test_submit_report(self, client):
        # Act
        response = client.post(
            "/api/reports",
            json={
                "abuserName": "Unknown",
                "natureOfAbuse": "physical",
                "descriptionOfIncident": "Seen near the market",
                "latitude": 5.6037,
                "longitude": -0.187,
                "evidence": [{"filename": "photo.jpg", "base64": "aW1n"}],
            },
        )

        # Assert
        assert response.status_code == 201
        report = response.json()["report"]
        assert report["natureOfAbuse"] == "physical"
        assert report["latitude"] == 5.6037
        assert report["evidence"] == [{"filename": "photo.jpg", "base64": "aW1n"}]
        assert report["date"]

    def test_empty_report_is_accepted(self, client):
        response = client.post("/api/reports", json={})

        assert response.status_code == 201
        assert response.json()["report"]["evidence"] == []

    def test_list_reports_newest_first(self, client):
        now = datetime.now(timezone.utc)
        yesterday = now - timedelta(days=1)
        client.post(
            "/api/reports", json={"location": "old", "date": yesterday.isoformat()}
        )
        client.post("/api/reports", json={"location": "new", "date": now.isoformat()})

        response = client.get("/api/reports")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [r["location"] for r in data["reports"]] == ["new", "old"]


class TestArticles:
    """Tests for /api/articles."""

    def test_list_articles(self, client, container):
        repo = resolve(container, ArticleRepository)
        asyncio.run(
            repo.save(
                Article(
                    id=ArticleId(uuid4()),
                    title="Recognising signs of neglect",
                    category="awareness",
                )
            )
        )

        response = client.get("/api/articles")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["articles"][0]["title"] == "Recognising signs of neglect"

    def test_no_articles(self, client):
        response = client.get("/api/articles")

        assert response.json() == {"articles": [], "count": 0}


class TestHealth:
    """Tests for the liveness endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Backend is running!"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
