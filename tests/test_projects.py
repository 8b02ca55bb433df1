import pytest
from httpx import AsyncClient

PAST = "2000-01-10T00:00:00Z"
FUTURE = "2099-06-01T00:00:00Z"
IN_PROGRESS_REASON = "Cannot mark invoice as sent for projects that are in progress"


@pytest.mark.asyncio
async def test_create_project_defaults(make_project):
    project = await make_project(deadline=FUTURE, sourceLang="English", targetLang="German")

    assert project["status"] == "In Progress"
    assert project["invoiceSent"] is False
    assert project["isPaid"] is False
    assert project["isArchived"] is False
    assert project["deadline"] == "2099-06-01T00:00:00"
    assert project["labels"] == ["In Progress"]


@pytest.mark.asyncio
async def test_create_project_requires_existing_client(async_client: AsyncClient):
    response = await async_client.post("/api/projects", json={"clientId": 404, "name": "Orphan"})
    assert response.status_code == 400
    assert response.json()["errors"] == {"clientId": ["Client not found"]}


@pytest.mark.asyncio
async def test_create_project_rejects_unknown_status(async_client: AsyncClient, make_client):
    client = await make_client()
    response = await async_client.post(
        "/api/projects",
        json={"clientId": client["id"], "name": "Legacy", "status": "completed"},
    )
    assert response.status_code == 400
    assert "status" in response.json()["errors"]


@pytest.mark.asyncio
async def test_create_project_rejects_negative_amount(async_client: AsyncClient, make_client):
    client = await make_client()
    response = await async_client.post(
        "/api/projects",
        json={"clientId": client["id"], "name": "Refund", "amount": -5},
    )
    assert response.status_code == 400
    assert "amount" in response.json()["errors"]


@pytest.mark.asyncio
async def test_create_in_progress_with_invoice_sent_is_rejected(async_client: AsyncClient, make_client):
    client = await make_client()
    response = await async_client.post(
        "/api/projects",
        json={"clientId": client["id"], "name": "Too early", "invoiceSent": True},
    )
    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid project data",
        "errors": {"invoiceSent": [IN_PROGRESS_REASON]},
    }


@pytest.mark.asyncio
async def test_patch_invoice_sent_on_in_progress_is_rejected(async_client: AsyncClient, make_project):
    project = await make_project()

    response = await async_client.patch(f"/api/projects/{project['id']}", json={"invoiceSent": True})
    assert response.status_code == 400
    assert response.json()["errors"] == {"invoiceSent": [IN_PROGRESS_REASON]}

    # Nothing was written
    response = await async_client.get(f"/api/projects/{project['id']}")
    assert response.json()["invoiceSent"] is False


@pytest.mark.asyncio
async def test_patch_back_to_in_progress_with_invoice_sent_is_rejected(async_client: AsyncClient, make_project):
    project = await make_project(status="Delivered", invoiceSent=True)

    response = await async_client.patch(f"/api/projects/{project['id']}", json={"status": "In Progress"})
    assert response.status_code == 400

    response = await async_client.patch(
        f"/api/projects/{project['id']}",
        json={"status": "In Progress", "invoiceSent": False},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "In Progress"


@pytest.mark.asyncio
async def test_delivered_with_invoice_sent_is_kept(async_client: AsyncClient, make_project):
    project = await make_project(deadline=PAST)

    response = await async_client.patch(
        f"/api/projects/{project['id']}",
        json={"status": "Delivered", "invoiceSent": True},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Delivered"
    assert data["invoiceSent"] is True
    assert data["labels"] == ["Invoice sent"]


@pytest.mark.asyncio
async def test_patch_is_partial(async_client: AsyncClient, make_project):
    project = await make_project(description="Homepage and legal pages")

    response = await async_client.patch(f"/api/projects/{project['id']}", json={"amount": 1200})
    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 1200
    assert data["description"] == "Homepage and legal pages"
    assert data["name"] == project["name"]


@pytest.mark.asyncio
async def test_patch_cannot_null_required_fields(async_client: AsyncClient, make_project):
    project = await make_project()

    response = await async_client.patch(f"/api/projects/{project['id']}", json={"status": None})
    assert response.status_code == 400
    assert response.json()["errors"] == {"status": ["Field cannot be null"]}


@pytest.mark.asyncio
async def test_missing_project_is_404(async_client: AsyncClient):
    assert (await async_client.get("/api/projects/42")).status_code == 404
    assert (await async_client.patch("/api/projects/42", json={"name": "x"})).status_code == 404
    assert (await async_client.delete("/api/projects/42")).status_code == 404
    assert (await async_client.get("/api/projects/42/mindmap")).status_code == 404


@pytest.mark.asyncio
async def test_list_filters_by_client(async_client: AsyncClient, make_client, make_project):
    tom = await make_client()
    sarah = await make_client(name="Sarah Johnson", email="sarah@techstyle.io")
    await make_project(clientId=tom["id"], name="Tom's project")
    await make_project(clientId=sarah["id"], name="Sarah's project")

    response = await async_client.get("/api/projects", params={"clientId": sarah["id"]})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Sarah's project"]

    response = await async_client.get("/api/projects")
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_list_sorted_by_urgency_with_exclusive_labels(async_client: AsyncClient, make_client, make_project):
    client = await make_client()
    cid = client["id"]
    await make_project(clientId=cid, name="paid", status="Paid", isPaid=True, deadline=PAST)
    await make_project(clientId=cid, name="pending", status="Delivered", invoiceSent=True, deadline=PAST)
    await make_project(clientId=cid, name="open-ended")
    await make_project(clientId=cid, name="later", deadline=FUTURE)
    await make_project(clientId=cid, name="late", deadline=PAST)

    response = await async_client.get("/api/projects", params={"sort": "urgency"})
    assert response.status_code == 200
    projects = response.json()
    assert [p["name"] for p in projects] == ["late", "later", "open-ended", "pending", "paid"]
    assert [p["labels"] for p in projects] == [
        ["Overdue"],
        ["In Progress"],
        ["In Progress"],
        ["Pending payment"],
        ["Paid"],
    ]


@pytest.mark.asyncio
async def test_unknown_sort_is_rejected(async_client: AsyncClient):
    response = await async_client.get("/api/projects", params={"sort": "name"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_detail_uses_accumulating_labels(async_client: AsyncClient, make_project):
    project = await make_project(status="Paid", isPaid=True, invoiceSent=True, deadline=PAST)

    listed = (await async_client.get("/api/projects")).json()
    assert listed[0]["labels"] == ["Paid"]

    detail = (await async_client.get(f"/api/projects/{project['id']}")).json()
    assert detail["labels"] == ["Invoice sent", "Paid"]


@pytest.mark.asyncio
async def test_delete_project_detaches_documents(async_client: AsyncClient, make_project):
    project = await make_project(status="Delivered")
    generated = await async_client.post(
        "/api/documents/generate",
        json={"type": "contract", "projectId": project["id"]},
    )
    assert generated.status_code == 201
    document_id = generated.json()["id"]

    response = await async_client.delete(f"/api/projects/{project['id']}")
    assert response.status_code == 204

    document = (await async_client.get(f"/api/documents/{document_id}")).json()
    assert document["projectId"] is None
    assert (await async_client.get(f"/api/projects/{project['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_mind_map_skeleton(async_client: AsyncClient, make_project):
    project = await make_project(name="Legal Translation", deadline="2025-05-18T00:00:00Z")

    response = await async_client.get(f"/api/projects/{project['id']}/mindmap")
    assert response.status_code == 200
    data = response.json()
    assert [n["id"] for n in data["nodes"]] == ["project", "deliverables", "timeline"]
    assert data["nodes"][0]["data"]["label"] == "Legal Translation"
    assert data["nodes"][2]["data"]["description"] == "Deadline: 5/18/2025"
    assert {(e["source"], e["target"]) for e in data["edges"]} == {
        ("project", "deliverables"),
        ("project", "timeline"),
    }


@pytest.mark.asyncio
async def test_save_mind_map(async_client: AsyncClient, make_project):
    project = await make_project()

    response = await async_client.post(
        f"/api/projects/{project['id']}/mindmap",
        json={"nodes": [{"id": "project"}], "edges": []},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Mind map saved successfully", "projectId": project["id"]}
