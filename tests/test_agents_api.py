"""Tests for application submission, the map feed, dashboards and admin review."""

import pytest

from platapay import db
from platapay.models import Agent, Profile


class TestSubmitApplication:
    def test_creates_pending_application(self, client, application_payload):
        response = client.post("/api/agents", json=application_payload)

        assert response.status_code == 201
        data = response.get_json()
        assert data["success"] is True
        assert len(data["application_id"]) == 8
        assert data["application_id"] == data["application_id"].upper()

        agent = Agent.query.one()
        assert agent.status == "pending"
        assert agent.application_id == data["application_id"]
        assert agent.latitude == pytest.approx(14.5547)

    def test_missing_fields_are_reported(self, client, application_payload):
        del application_payload["phone"]
        application_payload["business_name"] = "   "

        response = client.post("/api/agents", json=application_payload)

        assert response.status_code == 400
        data = response.get_json()
        assert "phone" in data["error"] and "business_name" in data["error"]
        assert data["error_code"] == 400
        assert Agent.query.count() == 0

    @pytest.mark.parametrize("location", [
        None,
        "14.5,121.0",
        [14.5, 121.0],
        14.5,
        {"latitude": 14.5},
        {"latitude": "north", "longitude": 121},
        {"latitude": 95, "longitude": 121},
        {"latitude": 14, "longitude": 181},
    ])
    def test_invalid_location(self, client, application_payload, location):
        application_payload["location"] = location

        response = client.post("/api/agents", json=application_payload)

        assert response.status_code == 400
        assert response.get_json()["error"] == "A valid location (latitude, longitude) is required."

    def test_numeric_strings_are_accepted_for_coordinates(self, client, application_payload):
        application_payload["location"] = {"latitude": "14.6", "longitude": "121.03"}

        response = client.post("/api/agents", json=application_payload)

        assert response.status_code == 201

    def test_non_object_body(self, client):
        response = client.post("/api/agents", json=["not", "an", "object"])
        assert response.status_code == 400


class TestGeoJSON:
    def test_only_approved_agents_are_published(self, client, make_agent):
        approved = make_agent(status="approved", latitude=14.5, longitude=121.0)
        make_agent(status="pending")
        make_agent(status="rejected")

        response = client.get("/api/agents/geojson")

        assert response.status_code == 200
        data = response.get_json()
        assert data["type"] == "FeatureCollection"
        assert len(data["features"]) == 1
        feature = data["features"][0]
        assert feature["geometry"] == {"type": "Point", "coordinates": [121.0, 14.5]}
        assert feature["properties"]["id"] == approved.id
        assert set(feature["properties"]) == {"id", "name", "address", "phone", "email"}

    def test_empty_collection(self, client):
        assert client.get("/api/agents/geojson").get_json() == {"type": "FeatureCollection", "features": []}


class TestDashboard:
    def test_requires_token(self, client):
        response = client.get("/api/dashboard")
        assert response.status_code == 401

    def test_agent_sees_own_applications(self, client, auth_headers, make_agent):
        make_agent(email="agent@example.com")
        make_agent(email="someone@example.com")

        response = client.get("/api/dashboard", headers=auth_headers())

        data = response.get_json()
        assert response.status_code == 200
        assert data["dashboard"] == "agent"
        assert [a["email"] for a in data["applications"]] == ["agent@example.com"]

    def test_admin_sees_counts(self, client, admin_headers, make_agent):
        make_agent(status="pending")
        make_agent(status="pending")
        make_agent(status="approved")

        data = client.get("/api/dashboard", headers=admin_headers).get_json()

        assert data["dashboard"] == "admin"
        assert data["counts"] == {"pending": 2, "approved": 1, "rejected": 0}


class TestAdminReview:
    def test_non_admin_is_forbidden(self, client, auth_headers):
        response = client.get("/api/admin/agents", headers=auth_headers())
        assert response.status_code == 403

    def test_lists_pending_by_default(self, client, admin_headers, make_agent):
        pending = make_agent(status="pending")
        make_agent(status="approved")

        data = client.get("/api/admin/agents", headers=admin_headers).get_json()

        assert [a["id"] for a in data["agents"]] == [pending.id]

    def test_invalid_status_filter(self, client, admin_headers):
        response = client.get("/api/admin/agents?status=archived", headers=admin_headers)
        assert response.status_code == 400

    def test_approve_application(self, client, admin_headers, make_agent):
        agent = make_agent(status="pending")

        response = client.post(f"/api/admin/agents/{agent.id}/status",
                               json={"status": "approved"}, headers=admin_headers)

        assert response.status_code == 200
        assert db.session.get(Agent, agent.id).status == "approved"
        assert len(client.get("/api/agents/geojson").get_json()["features"]) == 1

    def test_rejects_unknown_status(self, client, admin_headers, make_agent):
        agent = make_agent()
        response = client.post(f"/api/admin/agents/{agent.id}/status",
                               json={"status": "pending"}, headers=admin_headers)
        assert response.status_code == 400

    def test_unknown_agent(self, client, admin_headers):
        response = client.post("/api/admin/agents/nope/status",
                               json={"status": "approved"}, headers=admin_headers)
        assert response.status_code == 404

    def test_missing_status(self, client, admin_headers, make_agent):
        agent = make_agent()
        response = client.post(f"/api/admin/agents/{agent.id}/status", json={}, headers=admin_headers)
        assert response.status_code == 400


class TestProfileRoles:
    def test_list_profiles(self, client, admin_headers):
        data = client.get("/api/admin/profiles", headers=admin_headers).get_json()
        assert [p["email"] for p in data["profiles"]] == ["admin@platapay.test"]

    def test_promote_agent_to_admin(self, client, admin_headers, auth_headers):
        client.get("/auth/me", headers=auth_headers(user_id="user-9", email="nine@example.com"))

        response = client.post("/api/admin/profiles/user-9/role", json={"role": "admin"},
                               headers=admin_headers)

        assert response.status_code == 200
        assert db.session.get(Profile, "user-9").role == "admin"
        me = client.get("/auth/me", headers=auth_headers(user_id="user-9", email="nine@example.com"))
        assert me.get_json()["role"] == "admin"

    def test_invalid_role(self, client, admin_headers):
        response = client.post("/api/admin/profiles/admin-1/role", json={"role": "owner"},
                               headers=admin_headers)
        assert response.status_code == 400

    def test_unknown_profile(self, client, admin_headers):
        response = client.post("/api/admin/profiles/ghost/role", json={"role": "agent"},
                               headers=admin_headers)
        assert response.status_code == 404
