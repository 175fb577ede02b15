"""
Integration tests for the admin dashboard and member pages.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4


BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestAdminDashboard:
    """Tests for GET /admin."""

    def test_empty_gym(self, client, admin_headers):
        response = client.get("/admin", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["role"] == "admin"
        assert data["total_members"] == 0
        assert data["total_workouts"] == 0
        assert data["total_exercises"] == 0
        assert data["recent_assignments"] == []
        assert data["recent_summary"]["completion_rate"] == 0

    def test_counts_and_recent_lists(
        self,
        client,
        admin_headers,
        make_account,
        make_exercise,
        make_workout,
        make_assignment,
    ):
        members = [
            make_account(
                f"member{i}@example.com",
                full_name=f"Member {i}",
                created_at=BASE_TIME + timedelta(days=i),
            )[1]
            for i in range(7)
        ]
        make_exercise("Squat")
        workout = make_workout("Leg Day")
        for i in range(12):
            make_assignment(
                members[i % 7],
                workout,
                assigned_at=BASE_TIME + timedelta(hours=i),
                completed_at=BASE_TIME + timedelta(days=30) if i % 2 else None,
            )

        response = client.get("/admin", headers=admin_headers)

        data = response.json()
        # Admin profiles are not members
        assert data["total_members"] == 7
        assert data["total_workouts"] == 1
        assert data["total_exercises"] == 1
        assert [m["full_name"] for m in data["recent_members"]] == [
            "Member 6",
            "Member 5",
            "Member 4",
            "Member 3",
            "Member 2",
        ]
        assert len(data["recent_assignments"]) == 10
        assert data["recent_assignments"][0]["profile"]["full_name"] == "Member 4"
        assert data["recent_summary"]["total"] == 10
        assert data["recent_summary"]["completed"] == 5
        assert data["recent_summary"]["completion_rate"] == 50


class TestMembers:
    """Tests for /admin/members pages."""

    def test_list_with_stats(
        self, client, admin_headers, make_account, make_workout, make_assignment
    ):
        _, older = make_account("older@example.com", full_name="Older", created_at=BASE_TIME)
        _, newer = make_account(
            "newer@example.com", full_name="Newer", created_at=BASE_TIME + timedelta(days=1)
        )
        workout = make_workout("Push Day")
        make_assignment(older, workout, completed_at=BASE_TIME)
        make_assignment(older, workout)
        make_assignment(older, workout)

        response = client.get("/admin/members", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert [m["full_name"] for m in data] == ["Newer", "Older"]
        assert data[0]["total_workouts"] == 0
        assert data[0]["completion_rate"] == 0
        assert data[1]["total_workouts"] == 3
        assert data[1]["completed_workouts"] == 1
        assert data[1]["completion_rate"] == 33

    def test_detail(
        self, client, admin_headers, member_account, make_workout, make_assignment
    ):
        _, profile = member_account
        make_assignment(profile, make_workout("Push Day"), completed_at=BASE_TIME)
        make_assignment(profile, make_workout("Pull Day"))

        response = client.get(f"/admin/members/{profile.id}", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["member"]["email"] == "member@example.com"
        assert len(data["assignments"]) == 2
        assert data["summary"] == {
            "total": 2,
            "completed": 1,
            "pending": 1,
            "completion_rate": 50,
        }

    def test_detail_unknown_member_redirects(self, client, admin_headers):
        response = client.get(f"/admin/members/{uuid4()}", headers=admin_headers)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/members"

    def test_detail_of_admin_redirects(self, client, admin_account, admin_headers):
        response = client.get(
            f"/admin/members/{admin_account[1].id}", headers=admin_headers
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/members"
