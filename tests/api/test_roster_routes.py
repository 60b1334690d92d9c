"""Roster Routes - end-to-end CRUD over HTTP against a SQLite store.

Tests cover:
    - The create / list / update / delete / get walk-through
    - JSON and form-encoded bodies
    - 400 for invalid bodies, 404 for unknown ids (or 200 + null under NULL policy)
    - Error bodies are bare reason phrases
"""

async def test_full_crud_walkthrough(client):
    res = await client.post("/roster", json={"name": "Ada", "age": 36})
    assert res.status_code == 201
    ada = res.json()
    assert ada["id"]
    assert ada == {"id": ada["id"], "name": "Ada", "age": 36}

    res = await client.get("/roster")
    assert res.status_code == 200
    assert ada in res.json()

    res = await client.put(f"/roster/{ada['id']}", json={"age": 37})
    assert res.status_code == 200
    assert res.json() == {"id": ada["id"], "name": "Ada", "age": 37}

    res = await client.delete(f"/roster/{ada['id']}")
    assert res.status_code == 200
    assert res.json() == {"id": ada["id"], "name": "Ada", "age": 37}

    res = await client.get(f"/roster/{ada['id']}")
    assert res.status_code == 404
    assert res.text == "Not Found"


async def test_get_single_individual(client):
    created = (await client.post("/roster", json={"name": "Grace", "age": 85})).json()
    res = await client.get(f"/roster/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_list_starts_empty(client):
    res = await client.get("/roster")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_from_urlencoded_form(client):
    res = await client.post("/roster", data={"name": "Grace", "age": "85"})
    assert res.status_code == 201
    assert res.json()["age"] == 85


async def test_update_from_form_changes_only_given_field(client):
    created = (await client.post("/roster", json={"name": "Ada", "age": 36})).json()
    res = await client.put(f"/roster/{created['id']}", data={"name": "Ada L."})
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "name": "Ada L.", "age": 36}


async def test_create_missing_field_is_400_and_persists_nothing(client):
    res = await client.post("/roster", json={"name": "Ada"})
    assert res.status_code == 400
    assert res.text == "Bad Request"
    assert (await client.get("/roster")).json() == []


async def test_create_with_string_age_in_json_is_400(client):
    res = await client.post("/roster", json={"name": "Ada", "age": "36"})
    assert res.status_code == 400


async def test_create_with_unknown_field_is_400(client):
    res = await client.post(
        "/roster", json={"name": "Ada", "age": 36, "id": "chosen"},
    )
    assert res.status_code == 400


async def test_malformed_json_is_400(client):
    res = await client.post(
        "/roster",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.text == "Bad Request"


async def test_unsupported_content_type_is_400(client):
    res = await client.post(
        "/roster",
        content=b'{"name": "Ada", "age": 36}',
        headers={"content-type": "text/plain"},
    )
    assert res.status_code == 400
    assert res.text == "Bad Request"
    assert (await client.get("/roster")).json() == []


async def test_missing_content_type_is_400(client):
    res = await client.post("/roster", content=b'{"name": "Ada", "age": 36}')
    assert res.status_code == 400


async def test_json_with_charset_parameter_is_accepted(client):
    res = await client.post(
        "/roster",
        content=b'{"name": "Ada", "age": 36}',
        headers={"content-type": "application/json; charset=utf-8"},
    )
    assert res.status_code == 201


async def test_name_round_trips_verbatim(client):
    created = (await client.post("/roster", json={"name": " Ada ", "age": 36})).json()
    assert created["name"] == " Ada "
    fetched = (await client.get(f"/roster/{created['id']}")).json()
    assert fetched == {"id": created["id"], "name": " Ada ", "age": 36}


async def test_empty_body_is_400(client):
    res = await client.post("/roster")
    assert res.status_code == 400


async def test_update_with_null_field_is_400(client):
    created = (await client.post("/roster", json={"name": "Ada", "age": 36})).json()
    res = await client.put(f"/roster/{created['id']}", json={"name": None})
    assert res.status_code == 400
    assert (await client.get(f"/roster/{created['id']}")).json() == created


async def test_unknown_id_is_404_for_get_put_delete(client):
    assert (await client.get("/roster/missing")).status_code == 404
    assert (await client.put("/roster/missing", json={"age": 1})).status_code == 404
    assert (await client.delete("/roster/missing")).status_code == 404


async def test_null_policy_answers_200_with_null(null_client):
    for res in (
        await null_client.get("/roster/missing"),
        await null_client.put("/roster/missing", json={"age": 1}),
        await null_client.delete("/roster/missing"),
    ):
        assert res.status_code == 200
        assert res.json() is None


async def test_list_counts_creates_minus_deletes(client):
    ids = []
    for i in range(4):
        res = await client.post("/roster", json={"name": f"p{i}", "age": 20 + i})
        ids.append(res.json()["id"])
    await client.delete(f"/roster/{ids[0]}")
    listed = (await client.get("/roster")).json()
    assert len(listed) == 3
    assert ids[0] not in {r["id"] for r in listed}


async def test_cross_origin_requests_allowed(client):
    res = await client.get("/roster", headers={"Origin": "http://elsewhere.test"})
    assert res.headers["access-control-allow-origin"] == "*"
