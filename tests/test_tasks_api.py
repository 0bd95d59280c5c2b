# tests/test_tasks_api.py

from __future__ import annotations

from taskmanagement.models import TaskPriority, TaskStatus


def test_create_task_defaults(client) -> None:
    response = client.post("/api/tasks", json={"title": "Test Task"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body["title"] == "Test Task"
    assert body["status"] == "TODO"
    assert body["priority"] == "MEDIUM"
    assert body["assignedToId"] is None
    assert body["assignedToName"] is None
    assert body["createdAt"] and body["updatedAt"]


def test_create_task_with_assignee(client, make_user) -> None:
    user = make_user("John Doe", "john@example.com")

    response = client.post(
        "/api/tasks",
        json={
            "title": "Assigned Task",
            "description": "Some work",
            "priority": "HIGH",
            "dueDate": "2030-12-31",
            "assignedToId": user.id,
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["dueDate"] == "2030-12-31"
    assert body["assignedToId"] == user.id
    assert body["assignedToName"] == "John Doe"


def test_create_task_unknown_user_returns_404(client) -> None:
    response = client.post(
        "/api/tasks", json={"title": "Test Task", "priority": "HIGH", "assignedToId": 42}
    )

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert "User not found with id: 42" in body["message"]
    assert body["path"] == "/api/tasks"
    assert client.get("/api/tasks").json()["totalElements"] == 0


def test_create_task_validation_errors(client) -> None:
    response = client.post("/api/tasks", json={"title": "ab", "description": "x" * 501})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation Failed"
    assert set(body["validationErrors"]) == {"title", "description"}


def test_create_task_missing_title(client) -> None:
    response = client.post("/api/tasks", json={"description": "no title"})

    assert response.status_code == 400
    assert "title" in response.json()["validationErrors"]


def test_get_tasks_with_filters(client, make_user, make_task) -> None:
    user = make_user()
    make_task(title="Todo high", status=TaskStatus.TODO, priority=TaskPriority.HIGH, assigned_to=user)
    make_task(title="Todo low", status=TaskStatus.TODO, priority=TaskPriority.LOW)
    make_task(title="Done high", status=TaskStatus.DONE, priority=TaskPriority.HIGH)

    by_status = client.get("/api/tasks", params={"status": "TODO"}).json()
    assert {t["title"] for t in by_status["content"]} == {"Todo high", "Todo low"}

    combined = client.get("/api/tasks", params={"status": "TODO", "priority": "HIGH"}).json()
    assert [t["title"] for t in combined["content"]] == ["Todo high"]

    by_user = client.get("/api/tasks", params={"assignedToId": user.id}).json()
    assert [t["title"] for t in by_user["content"]] == ["Todo high"]

    everything = client.get("/api/tasks").json()
    assert everything["totalElements"] == 3


def test_get_tasks_pagination(client, make_task) -> None:
    for i in range(5):
        make_task(title=f"Task {i}")

    body = client.get("/api/tasks", params={"page": 0, "size": 2}).json()

    assert len(body["content"]) == 2
    assert body["totalElements"] == 5
    assert body["totalPages"] == 3
    assert body["first"] is True
    assert body["last"] is False
    assert body["number"] == 0
    assert body["size"] == 2


def test_get_tasks_rejects_bad_paging_and_enum(client) -> None:
    assert client.get("/api/tasks", params={"page": -1}).status_code == 400
    assert client.get("/api/tasks", params={"size": 0}).status_code == 400
    response = client.get("/api/tasks", params={"status": "ARCHIVED"})
    assert response.status_code == 400
    assert "status" in response.json()["validationErrors"]


def test_get_task_by_id(client, make_task) -> None:
    task = make_task(title="Find me")

    response = client.get(f"/api/tasks/{task.id}")

    assert response.status_code == 200
    assert response.json()["title"] == "Find me"


def test_get_task_not_found(client) -> None:
    response = client.get("/api/tasks/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Task not found with id: 999"


def test_update_task(client, make_user, make_task) -> None:
    user = make_user()
    task = make_task(title="Old title", status=TaskStatus.IN_PROGRESS)

    response = client.put(
        f"/api/tasks/{task.id}",
        json={"title": "New title", "priority": "LOW", "assignedToId": user.id},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "New title"
    assert body["status"] == "IN_PROGRESS"
    assert body["priority"] == "LOW"
    assert body["assignedToName"] == "John Doe"


def test_update_task_missing_task_or_user(client, make_task) -> None:
    assert client.put("/api/tasks/999", json={"title": "Whatever"}).status_code == 404

    task = make_task()
    response = client.put(f"/api/tasks/{task.id}", json={"title": "Whatever", "assignedToId": 555})
    assert response.status_code == 404
    assert "User not found with id: 555" in response.json()["message"]


def test_patch_status_changes_only_status(client, make_task) -> None:
    task = make_task(title="Task", status=TaskStatus.TODO, priority=TaskPriority.HIGH)

    response = client.patch(f"/api/tasks/{task.id}/status", json={"status": "DONE"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "DONE"
    assert body["title"] == "Task"
    assert body["priority"] == "HIGH"


def test_patch_status_requires_valid_status(client, make_task) -> None:
    task = make_task()

    missing = client.patch(f"/api/tasks/{task.id}/status", json={})
    assert missing.status_code == 400
    assert "status" in missing.json()["validationErrors"]

    assert client.patch(f"/api/tasks/{task.id}/status", json={"status": "done"}).status_code == 400


def test_patch_status_not_found(client) -> None:
    assert client.patch("/api/tasks/7/status", json={"status": "DONE"}).status_code == 404


def test_delete_task(client, make_task) -> None:
    task = make_task()

    response = client.delete(f"/api/tasks/{task.id}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/api/tasks/{task.id}").status_code == 404
    assert client.delete(f"/api/tasks/{task.id}").status_code == 404


def test_create_task_blank_title(client) -> None:
    response = client.post("/api/tasks", json={"title": "     "})

    assert response.status_code == 400
    assert "title" in response.json()["validationErrors"]


def test_out_of_range_ids_are_validation_failures(client) -> None:
    too_big = "99999999999999999999"

    for method, path in [
        ("GET", f"/api/tasks/{too_big}"),
        ("DELETE", f"/api/tasks/{too_big}"),
        ("GET", "/api/tasks/0"),
    ]:
        response = client.request(method, path)
        assert response.status_code == 400, path
        assert "task_id" in response.json()["validationErrors"]

    response = client.patch(f"/api/tasks/{too_big}/status", json={"status": "DONE"})
    assert response.status_code == 400

    response = client.get("/api/tasks", params={"assignedToId": too_big})
    assert response.status_code == 400
    assert "assignedToId" in response.json()["validationErrors"]

    response = client.post("/api/tasks", json={"title": "Huge", "assignedToId": int(too_big)})
    assert response.status_code == 400
    assert "assignedToId" in response.json()["validationErrors"]


def test_malformed_json_is_reported_against_body(client) -> None:
    response = client.post(
        "/api/tasks",
        content=b'{"title": "Task",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert list(response.json()["validationErrors"]) == ["body"]
