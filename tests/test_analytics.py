import asyncio
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from blog_app.exceptions import ValidationError
from blog_app.models.visit import Visit
from blog_app.services.analytics_service import AnalyticsService
from blog_app.services.visit_service import VisitService
from blog_app.timeutils import start_of_day, utcnow


def add_visit(db_session, ip, when, page="/", user_agent="pytest"):
    db_session.add(Visit(ip=ip, user_agent=user_agent, page=page, timestamp=when))
    db_session.commit()


def seed_two_days(db_session, now):
    """
    3 visits from one IP today, 2 from another IP yesterday.

    Visits sit around noon UTC so the day they fall on does not depend on
    when the test runs. Returns that noon, to use as the reference time.
    """
    noon = start_of_day(now) + timedelta(hours=12)
    for seconds in (1, 2, 3):
        add_visit(db_session, "10.0.0.1", noon - timedelta(seconds=seconds))
    for seconds in (1, 2):
        add_visit(db_session, "10.0.0.2", noon - timedelta(days=1, seconds=seconds))
    return noon


class TestVisitsAPI:
    """Test visit recording"""

    def test_record_visit(self, client: TestClient, db_session):
        payload = {"ip": "192.168.1.1", "userAgent": "Mozilla/5.0", "page": "/about"}

        response = client.post("/api/v1/visits", json=payload)
        assert response.status_code == 201
        assert "message" in response.json()

        visit = db_session.query(Visit).one()
        assert visit.ip == "192.168.1.1"
        assert visit.user_agent == "Mozilla/5.0"
        assert visit.page == "/about"
        assert visit.timestamp is not None

    def test_record_visit_defaults(self, client: TestClient, db_session):
        response = client.post("/api/v1/visits", json={"ip": "192.168.1.1"})
        assert response.status_code == 201

        visit = db_session.query(Visit).one()
        assert visit.user_agent == ""
        assert visit.page == ""

    def test_record_visit_requires_ip(self, client: TestClient):
        response = client.post("/api/v1/visits", json={"page": "/"})
        assert response.status_code == 400
        assert response.json() == {"error": "IP address is required"}

    def test_no_deduplication(self, db_session):
        service = VisitService(db_session)

        asyncio.run(service.record_visit("1.1.1.1"))
        asyncio.run(service.record_visit("1.1.1.1"))

        assert db_session.query(Visit).count() == 2


class TestAnalyticsAPI:
    """Test the analytics endpoints"""

    def test_requires_token(self, client: TestClient):
        assert client.get("/api/v1/analytics").status_code == 401
        assert client.delete("/api/v1/analytics/cleanup").status_code == 401

    def test_summary(self, client: TestClient, db_session, auth_headers):
        seed_two_days(db_session, utcnow())

        response = client.get("/api/v1/analytics?days=7", headers=auth_headers)
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 5
        assert data["unique"] == 2
        assert data["today"] == 3
        assert len(data["daily"]) == 2
        assert sum(day["count"] for day in data["daily"]) == 5
        assert data["daily"][0]["date"] < data["daily"][1]["date"]
        assert len(data["recent"]) == 5
        assert data["recent"][0]["ip"] == "10.0.0.1"
        assert set(data["recent"][0]) == {"ip", "user_agent", "page", "timestamp"}
        assert data["recent"][0]["timestamp"].endswith("Z")

    def test_days_out_of_range(self, client: TestClient, auth_headers):
        assert client.get("/api/v1/analytics?days=-1", headers=auth_headers).status_code == 400
        assert client.get("/api/v1/analytics?days=100000", headers=auth_headers).status_code == 400

    def test_cleanup(self, client: TestClient, db_session, auth_headers):
        now = utcnow()
        add_visit(db_session, "10.0.0.1", now - timedelta(days=30))
        add_visit(db_session, "10.0.0.1", now - timedelta(hours=1))

        response = client.delete("/api/v1/analytics/cleanup?days=12", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["deleted"] == 1
        assert db_session.query(Visit).count() == 1


class TestAnalyticsService:
    """Test the aggregation and retention logic directly"""

    def test_summary_counts(self, db_session):
        now = seed_two_days(db_session, utcnow())

        summary = asyncio.run(AnalyticsService(db_session).summary(days=7, now=now))

        assert summary.total == 5
        assert summary.unique == 2
        assert summary.today == 3
        assert [d.count for d in summary.daily] == [2, 3]

    def test_daily_omits_empty_days_and_respects_window(self, db_session):
        now = utcnow()
        add_visit(db_session, "1.1.1.1", now)
        add_visit(db_session, "1.1.1.1", now - timedelta(days=3))
        add_visit(db_session, "1.1.1.1", now - timedelta(days=40))

        summary = asyncio.run(AnalyticsService(db_session).summary(days=7, now=now))

        assert len(summary.daily) == 2
        assert summary.total == 3

    def test_recent_is_limited_and_newest_first(self, db_session):
        now = utcnow()
        for i in range(15):
            add_visit(db_session, f"10.0.0.{i}", now - timedelta(days=60, minutes=i))

        summary = asyncio.run(AnalyticsService(db_session).summary(days=1, now=now))

        assert len(summary.recent) == 10
        assert summary.recent[0].ip == "10.0.0.0"
        assert summary.daily == []

    def test_empty_store(self, db_session):
        summary = asyncio.run(AnalyticsService(db_session).summary())

        assert summary.total == 0
        assert summary.unique == 0
        assert summary.today == 0
        assert summary.daily == []
        assert summary.recent == []

    def test_cleanup_zero_removes_everything(self, db_session):
        now = seed_two_days(db_session, utcnow()) + timedelta(hours=1)
        service = AnalyticsService(db_session)

        assert asyncio.run(service.cleanup(0, now=now)) == 5
        assert asyncio.run(service.cleanup(0, now=now)) == 0
        assert db_session.query(Visit).count() == 0

    def test_cleanup_rejects_negative_days(self, db_session):
        with pytest.raises(ValidationError):
            asyncio.run(AnalyticsService(db_session).cleanup(-1))
