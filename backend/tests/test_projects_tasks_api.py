"""
API tests for /api/projects/ and /api/tasks/.
"""
import uuid

import pytest

from workflow.models import Task


@pytest.mark.django_db
class TestProjectAPI:
    def test_create_requires_existing_client(self, api, db):
        response = api.post(
            "/api/projects/",
            {"title": "Orphan", "client_id": str(uuid.uuid4()), "status": "planning"},
            format="json",
        )
        assert response.status_code == 400
        assert "client_id" in response.json()

    def test_create_and_computed_fields(self, api, make_client):
        client = make_client()
        response = api.post(
            "/api/projects/",
            {
                "title": "ShopMart Platform",
                "client_id": str(client.id),
                "status": "in_progress",
                "budget": 10000,
                "currency": "USD",
            },
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["client_id"] == str(client.id)
        assert body["progress"] == 60
        assert body["budget_display"] == "KSH 1,300,000"
        assert body["created_at"] == body["updated_at"]

    def test_list_filters_by_client_and_status(self, api, make_client, make_project):
        first, second = make_client(email="a@x.com"), make_client(email="b@x.com")
        mine = make_project(client=first, status="review")
        make_project(client=second, status="review")
        make_project(client=first, status="completed")

        by_client = api.get(f"/api/projects/?client={first.id}").json()
        by_status = api.get("/api/projects/?status=completed").json()

        assert len(by_client) == 2
        assert str(mine.id) in {p["id"] for p in by_client}
        assert [p["status"] for p in by_status] == ["completed"]

        both = api.get(f"/api/projects/?client={first.id}&status=review").json()
        assert [p["id"] for p in both] == [str(mine.id)]

    def test_list_with_malformed_client_filter_is_400(self, api, db):
        assert api.get("/api/projects/?client=not-a-uuid").status_code == 400

    def test_detail_reports_task_completion(self, api, make_project, make_task):
        project = make_project()
        make_task(project=project, status="completed")
        make_task(project=project, status="todo")
        make_task(project=project, status="review")

        body = api.get(f"/api/projects/{project.id}").json()

        assert body["task_completion"] == 33
        assert body["progress"] == 20

    def test_client_reference_cannot_be_patched(self, api, make_project, make_client):
        project = make_project()
        other = make_client(email="other@x.com")

        response = api.patch(f"/api/projects/{project.id}", {"client_id": str(other.id)}, format="json")

        assert response.status_code == 400
        assert response.json() == {"detail": "No valid fields to update"}


@pytest.mark.django_db
class TestTaskAPI:
    def test_create_persists_fields(self, api, make_project):
        project = make_project()
        payload = {
            "title": "Checkout flow",
            "description": "Stripe integration",
            "project_id": str(project.id),
            "assigned_to": "Jordan Lee",
            "status": "todo",
            "priority": "high",
            "due_date": "2030-01-15T12:00:00Z",
        }
        response = api.post("/api/tasks/", payload, format="json")

        assert response.status_code == 201
        body = response.json()
        for key, value in payload.items():
            assert body[key] == value

    def test_create_rejects_bad_priority(self, api, db):
        response = api.post(
            "/api/tasks/", {"title": "X", "status": "todo", "priority": "urgent"}, format="json",
        )
        assert response.status_code == 400

    def test_filter_by_status_and_project(self, api, make_project, make_task):
        project = make_project()
        in_project = make_task(project=project, status="in_progress")
        loose = make_task(status="in_progress")
        make_task(status="todo")

        by_status = {t["id"] for t in api.get("/api/tasks/?status=in_progress").json()}
        by_project = [t["id"] for t in api.get(f"/api/tasks/?project={project.id}").json()]

        assert by_status == {str(in_project.id), str(loose.id)}
        assert by_project == [str(in_project.id)]

    def test_deleting_project_leaves_tasks(self, api, make_project, make_task):
        project = make_project()
        task = make_task(project=project)

        assert api.delete(f"/api/projects/{project.id}").status_code == 204
        assert Task.objects.get(id=task.id).project_id == project.id

    def test_patch_status(self, api, make_task):
        task = make_task()
        body = api.patch(f"/api/tasks/{task.id}", {"status": "completed"}, format="json").json()

        assert body["status"] == "completed"
        assert body["priority"] == "medium"
