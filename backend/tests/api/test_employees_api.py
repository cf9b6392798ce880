"""Employees API — CRUD over /employees with hypermedia documents.

Invariants:
    - POST returns 201 + Location and splits name on the first space
    - GET of an unknown id returns 404 text/plain "Could not find employee {id}"
    - PUT upserts, preserving the path id
    - DELETE is idempotent (204 twice)
    - Documents carry self + employees; the collection carries self only
"""

import pytest


async def test_post_employee_returns_created_document(client):
    res = await client.post(
        "/employees", json={"name": "Bilbo Baggins", "role": "burglar"},
    )
    assert res.status_code == 201
    assert res.headers["location"] == "/employees/1"
    body = res.json()
    assert body["id"] == 1
    assert body["firstName"] == "Bilbo"
    assert body["lastName"] == "Baggins"
    assert body["role"] == "burglar"
    assert body["name"] == "Bilbo Baggins"
    assert body["_links"]["self"]["href"] == "/employees/1"
    assert body["_links"]["employees"]["href"] == "/employees"


async def test_post_accepts_first_and_last_name(client):
    res = await client.post(
        "/employees",
        json={"firstName": "Samwise", "lastName": "Gamgee", "role": "gardener"},
    )
    assert res.status_code == 201
    assert res.json()["name"] == "Samwise Gamgee"


async def test_post_then_get_round_trip(client, bilbo):
    res = await client.get(f"/employees/{bilbo['id']}")
    assert res.status_code == 200
    assert res.json() == bilbo


async def test_get_unknown_employee_is_plain_text_404(client):
    res = await client.get("/employees/9999")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Could not find employee 9999"


async def test_collection_embeds_employees(client, bilbo):
    await client.post("/employees", json={"name": "Frodo Baggins", "role": "thief"})
    res = await client.get("/employees")
    assert res.status_code == 200
    body = res.json()
    assert body["_links"] == {"self": {"href": "/employees"}}
    items = body["_embedded"]["employees"]
    assert [e["name"] for e in items] == ["Bilbo Baggins", "Frodo Baggins"]
    assert all(set(e["_links"]) == {"self", "employees"} for e in items)


async def test_empty_collection(client):
    res = await client.get("/employees")
    assert res.json()["_embedded"] == {"employees": []}


async def test_put_existing_employee_updates_in_place(client, bilbo):
    res = await client.put(
        "/employees/1", json={"name": "Frodo Baggins", "role": "thief"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert (body["firstName"], body["lastName"], body["role"]) == (
        "Frodo", "Baggins", "thief",
    )
    assert (await client.get("/employees/1")).json() == body
    assert len((await client.get("/employees")).json()["_embedded"]["employees"]) == 1


async def test_put_absent_employee_creates_at_path_id(client):
    res = await client.put(
        "/employees/42", json={"name": "Samwise Gamgee", "role": "gardener"},
    )
    assert res.status_code == 200
    assert res.json()["id"] == 42
    assert res.json()["_links"]["self"]["href"] == "/employees/42"
    assert (await client.get("/employees/42")).json() == res.json()


async def test_put_ignores_body_id(client, bilbo):
    res = await client.put(
        "/employees/1", json={"id": 99, "name": "Frodo Baggins", "role": "thief"},
    )
    assert res.json()["id"] == 1
    assert (await client.get("/employees/99")).status_code == 404


async def test_delete_is_idempotent(client, bilbo):
    first = await client.delete("/employees/1")
    second = await client.delete("/employees/1")
    assert first.status_code == 204
    assert second.status_code == 204
    assert first.content == b""
    assert (await client.get("/employees/1")).status_code == 404


@pytest.mark.parametrize("payload", [
    {"name": "Gandalf", "role": "wizard"},
    {"name": "A B"},
    {"role": "wizard"},
    {"name": "A B", "role": ""},
])
async def test_invalid_employee_body_is_400(client, payload):
    res = await client.post("/employees", json=payload)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/employees", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400


async def test_non_numeric_id_is_400(client):
    res = await client.get("/employees/abc")
    assert res.status_code == 400


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize("employee_id", ["99999999999999999999", "0", "-1"])
async def test_out_of_range_id_is_400(client, method, employee_id):
    kwargs = {"json": {"name": "A B", "role": "r"}} if method == "PUT" else {}
    res = await client.request(method, f"/employees/{employee_id}", **kwargs)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_largest_id_is_accepted(client):
    res = await client.get(f"/employees/{2**63 - 1}")
    assert res.status_code == 404


async def test_collection_lists_reinserted_employee_by_id(client):
    await client.post("/employees", json={"name": "A B", "role": "r"})
    await client.post("/employees", json={"name": "C D", "role": "r"})
    await client.delete("/employees/1")
    await client.put("/employees/1", json={"name": "E F", "role": "r"})
    items = (await client.get("/employees")).json()["_embedded"]["employees"]
    assert [e["name"] for e in items] == ["E F", "C D"]
