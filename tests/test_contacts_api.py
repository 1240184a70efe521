BASE = "/api/v1/contacts"

IVAN = {"id": "1", "name": "Иван Иванов", "phone": "+79161234567", "email": "ivan@mail.ru"}
PETR = {"id": "2", "name": "Петр Петров", "phone": "+79169876543", "email": "petr@mail.ru"}

NOT_FOUND = {"error": "Контакт не найден"}
INVALID = {"error": "Неверные данные"}


def test_list_contacts_returns_seed_records(client):
    response = client.get(BASE)
    assert response.status_code == 200
    assert response.json() == [IVAN, PETR]


def test_get_contact(client):
    response = client.get(f"{BASE}/1")
    assert response.status_code == 200
    assert response.json() == IVAN


def test_get_unknown_contact(client):
    response = client.get(f"{BASE}/99")
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_delete_scenario(client):
    assert client.get(f"{BASE}/1").json()["name"] == "Иван Иванов"

    response = client.delete(f"{BASE}/1")
    assert response.status_code == 200
    assert response.json() == {"message": "Контакт удален"}

    assert client.get(f"{BASE}/1").status_code == 404
    assert client.get(BASE).json() == [PETR]


def test_repeated_delete_fails(client):
    assert client.delete(f"{BASE}/2").status_code == 200
    for _ in range(2):
        response = client.delete(f"{BASE}/2")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND


def test_create_contact(client):
    payload = {"name": "A", "phone": "1", "email": "a@x.com"}
    response = client.post(BASE, json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] not in {"1", "2"}
    assert {k: created[k] for k in payload} == payload

    fetched = client.get(f"{BASE}/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created
    assert client.get(BASE).json()[-1] == created


def test_create_ignores_payload_id(client):
    response = client.post(BASE, json={"id": "1", "name": "B", "phone": "2", "email": "b@x.com"})
    assert response.status_code == 201
    assert response.json()["id"] == "3"
    assert client.get(f"{BASE}/1").json() == IVAN


def test_create_after_delete_does_not_reuse_ids(client):
    client.delete(f"{BASE}/1")
    created = client.post(BASE, json={"name": "C"}).json()
    assert created["id"] not in {"1", "2"}
    ids = [c["id"] for c in client.get(BASE).json()]
    assert len(ids) == len(set(ids))


def test_create_with_missing_and_null_fields(client):
    response = client.post(BASE, json={"name": "Only name", "email": None})
    assert response.status_code == 201
    body = response.json()
    assert body["phone"] == ""
    assert body["email"] == ""


def test_create_with_invalid_json(client):
    response = client.post(BASE, content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == INVALID


def test_create_with_wrong_field_type(client):
    response = client.post(BASE, json={"name": 42, "phone": "1", "email": "a@x.com"})
    assert response.status_code == 400
    assert response.json() == INVALID


def test_create_with_non_object_body(client):
    response = client.post(BASE, json=["name", "phone"])
    assert response.status_code == 400
    assert response.json() == INVALID


def test_create_without_body(client):
    response = client.post(BASE)
    assert response.status_code == 400
    assert len(client.get(BASE).json()) == 2


def test_update_contact_keeps_id_and_position(client):
    payload = {"id": "77", "name": "Иван Сидоров", "phone": "+70000000000", "email": "sidorov@mail.ru"}
    response = client.put(f"{BASE}/1", json=payload)
    assert response.status_code == 200
    updated = response.json()
    assert updated == {**payload, "id": "1"}

    contacts = client.get(BASE).json()
    assert [c["id"] for c in contacts] == ["1", "2"]
    assert contacts[0] == updated
    assert client.get(f"{BASE}/77").status_code == 404


def test_update_overwrites_all_fields(client):
    response = client.put(f"{BASE}/2", json={"name": "Петр"})
    assert response.status_code == 200
    assert response.json() == {"id": "2", "name": "Петр", "phone": "", "email": ""}


def test_update_unknown_contact(client):
    response = client.put(f"{BASE}/99", json={"name": "X", "phone": "0", "email": "x@x.com"})
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_update_with_invalid_body(client):
    response = client.put(f"{BASE}/1", content=b"[", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == INVALID
    assert client.get(f"{BASE}/1").json() == IVAN


def test_update_with_invalid_body_on_unknown_id(client):
    response = client.put(f"{BASE}/99", json={"phone": 5})
    assert response.status_code == 400


def test_delete_shifts_following_contacts(client):
    third = client.post(BASE, json={"name": "C"}).json()
    assert client.delete(f"{BASE}/2").status_code == 200
    assert [c["id"] for c in client.get(BASE).json()] == ["1", third["id"]]


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/v1/unknown")
    assert response.status_code == 404
    assert "error" in response.json()


def test_method_not_allowed(client):
    response = client.patch(f"{BASE}/1", json={"name": "X"})
    assert response.status_code == 405
    assert "error" in response.json()


def test_apps_do_not_share_registries(client, settings):
    from fastapi.testclient import TestClient

    from contacts_api.app.main import create_app

    client.delete(f"{BASE}/1")
    other = TestClient(create_app(settings))
    assert other.get(f"{BASE}/1").status_code == 200


def test_swagger_docs(client):
    assert client.get("/swagger").status_code == 200
    schema = client.get("/swagger/openapi.json").json()
    assert schema["info"]["title"] == "Contacts API"
    assert "/api/v1/contacts" in schema["paths"]
    assert "/api/v1/contacts/{contact_id}" in schema["paths"]


def test_create_with_body_that_is_not_utf8(client):
    response = client.post(BASE, content=b'{"name":"\xff"}', headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == INVALID
    assert len(client.get(BASE).json()) == 2


def test_bad_request_detail_is_replaced(app, client):
    from fastapi import HTTPException

    async def unreadable():
        raise HTTPException(status_code=400, detail="There was an error parsing the body")

    app.add_api_route("/unreadable", unreadable, methods=["POST"])
    response = client.post("/unreadable")
    assert response.status_code == 400
    assert response.json() == INVALID


def test_create_ignores_content_type(client):
    payload = {"name": "A", "phone": "1", "email": "a@x.com"}
    response = client.post(
        BASE,
        content=b'{"name":"A","phone":"1","email":"a@x.com"}',
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 201
    assert {k: response.json()[k] for k in payload} == payload


def test_update_without_content_type(client):
    response = client.put(f"{BASE}/2", content=b'{"name":"Petr"}')
    assert response.status_code == 200
    assert response.json()["name"] == "Petr"


def test_create_with_null_body(client):
    response = client.post(BASE, content=b"null", headers={"Content-Type": "application/json"})
    assert response.status_code == 201
    assert response.json() == {"id": "3", "name": "", "phone": "", "email": ""}


def test_update_with_null_body_clears_fields(client):
    response = client.put(f"{BASE}/1", content=b" null ", headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json() == {"id": "1", "name": "", "phone": "", "email": ""}


def test_docs_describe_contact_body(client):
    schema = client.get("/swagger/openapi.json").json()
    body = schema["paths"]["/api/v1/contacts"]["post"]["requestBody"]
    assert set(body["content"]["application/json"]["schema"]["properties"]) >= {"name", "phone", "email"}
