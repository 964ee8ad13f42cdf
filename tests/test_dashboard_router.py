# /tests/test_dashboard_router.py

from datetime import datetime

from sqlalchemy.exc import OperationalError

from lugyi_admin.db.models.media_models import Content, ContentView, User
from lugyi_admin.services import dashboard_service


def test_overview_defaults_to_month(client, session):
    session.add(User(name="alice", created_at=datetime.now()))
    session.commit()

    response = client.get("/api/dashboard/overview")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"users", "devices", "content", "subscriptions", "views", "meta"}
    assert body["meta"]["time_range"] == "month"
    assert body["users"]["total"] == 1
    assert body["users"]["change_percentage"] == 100.0
    assert len(body["users"]["chart"]) == 1
    assert set(body["devices"]) == {"total", "vip_devices", "daily_active", "change_percentage", "chart"}


def test_overview_with_explicit_period(client):
    response = client.get("/api/dashboard/overview", params={"time_range": "year"})
    assert response.status_code == 200
    assert response.json()["meta"]["time_range"] == "year"


def test_overview_views_section_shape(client, session):
    content = Content(title="Match Highlights", is_vip=True, views_count=1)
    session.add(content)
    session.flush()
    session.add(ContentView(content_id=content.id, created_at=datetime.now()))
    session.commit()

    views = client.get("/api/dashboard/overview", params={"time_range": "week"}).json()["views"]

    assert views["total"] == 1
    assert views["vip_views"] == 1
    assert list(views["chart"][0]) == ["date", "total_views", "vip_views"]


def test_overview_rejects_unknown_period(client, mocker):
    """An invalid period is a client error and the service is never reached."""
    get_overview = mocker.patch.object(dashboard_service, "get_overview")

    response = client.get("/api/dashboard/overview", params={"time_range": "bogus"})

    assert response.status_code == 422
    get_overview.assert_not_called()


def test_overview_query_failure_is_a_server_error(client, mocker):
    mocker.patch.object(
        dashboard_service,
        "get_overview",
        side_effect=OperationalError("SELECT 1", {}, Exception("connection lost")),
    )

    response = client.get("/api/dashboard/overview")

    assert response.status_code == 500
    assert "dashboard statistics" in response.json()["detail"]
