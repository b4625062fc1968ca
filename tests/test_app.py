import io
from unittest import mock

import pytest

from sglrights.app import create_app, main


@pytest.fixture
def static_dir(tmp_path):
    return tmp_path / "static"


@pytest.fixture
def client(tmp_path, static_dir):
    app = create_app(tmp_path / "store.db", static_dir)
    app.config["TESTING"] = True
    return app.test_client()


def event_form(**overrides):
    form = {
        "nameRu": "Турнир",
        "nameEn": "Cup",
        "nameKz": "Кубок",
        "descriptionRu": "desc-ru",
        "descriptionEn": "desc-en",
        "descriptionKz": "desc-kz",
        "manager": "alice",
        "developer": "valve",
        "placeRu": "place-ru",
        "placeEn": "place-en",
        "placeKz": "place-kz",
        "discipline": "cs",
        "startTime": "100",
        "endTime": "200",
        "prize": "5000",
    }
    form.update(overrides)
    return form


def create_event(client, photo_name="pic.png", data=b"img", **overrides):
    form = event_form(**overrides)
    form["photo"] = (io.BytesIO(data), photo_name)
    return client.post("/createEvent", data=form, content_type="multipart/form-data")


def user_form(**overrides):
    password = "password"
    form = {
        "firstName": "Ann",
        "lastName": "Lee",
        "company": "Acme",
        "mail": "ann@example.com",
        "phone": "unlisted",
        "login": "ann",
        "password": password,
        "isAdmin": "1",
    }
    form.update(overrides)
    return form


def create_user(client, **overrides):
    form = user_form(**overrides)
    form["photo"] = (io.BytesIO(b"face"), "face.jpg")
    return client.post("/createUser", data=form, content_type="multipart/form-data")


def test_create_event_stores_fields_and_photo(client, static_dir):
    response = create_event(client)
    assert response.get_data(as_text=True) == "Событие успешно добавлено"

    events = client.get("/getAllEvents").get_json()
    assert len(events) == 1
    event = events[0]
    assert event["name"] == {"ru": "Турнир", "en": "Cup", "kk": "Кубок"}
    assert event["prize"] == 5000
    assert event["startTime"] == 100
    assert event["discipline"] == "cs"
    assert event["previewPhoto"].endswith(".png")
    assert (static_dir / event["previewPhoto"]).read_bytes() == b"img"


def test_create_event_without_photo_is_rejected(client):
    response = client.post("/createEvent", data=event_form())
    assert response.status_code == 400
    assert client.get("/getAllEvents").get_json() == []


def test_invalid_number_becomes_zero(client):
    create_event(client, prize="lots")
    assert client.get("/getAllEvents").get_json()[0]["prize"] == 0


def test_unknown_event_is_empty(client):
    event = client.get("/getEventById?id=42").get_json()
    assert event["id"] == 0
    assert event["name"]["en"] == ""


def test_wrong_method_does_nothing(client):
    response = client.get("/createEvent")
    assert response.data == b""
    assert client.post("/getAllEvents").data == b""
    assert client.get("/getAllEvents").get_json() == []


def test_get_event_by_id(client):
    create_event(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    event = client.get(f"/getEventById?id={event_id}").get_json()
    assert event["id"] == event_id
    assert event["manager"] == "alice"


def test_update_event_keeps_given_preview(client):
    create_event(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    form = event_form(id=str(event_id), previewPhoto="kept.png", nameEn="Final")
    response = client.post("/updateEvent", data=form)
    assert response.get_data(as_text=True) == "Событие успешно изменено"

    event = client.get(f"/getEventById?id={event_id}").get_json()
    assert event["name"]["en"] == "Final"
    assert event["previewPhoto"] == "kept.png"


def test_update_event_with_new_photo(client, static_dir):
    create_event(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    form = event_form(id=str(event_id))
    form["photo"] = (io.BytesIO(b"new"), "new.gif")
    client.post("/updateEvent", data=form, content_type="multipart/form-data")
    event = client.get(f"/getEventById?id={event_id}").get_json()
    assert event["previewPhoto"].endswith(".gif")
    assert (static_dir / event["previewPhoto"]).read_bytes() == b"new"


def test_update_event_without_any_photo_is_rejected(client):
    create_event(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    response = client.post("/updateEvent", data=event_form(id=str(event_id)))
    assert response.status_code == 400


def test_remove_event(client):
    create_event(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    client.post("/removeEvent", data={"id": str(event_id)})
    assert client.get("/getAllEvents").get_json() == []


def test_filters_list_distinct_values(client):
    create_event(client, manager="alice", developer="valve", discipline="cs")
    create_event(client, manager="bob", developer="valve", discipline="dota")
    filters = client.get("/getEventsFilters").get_json()
    assert sorted(filters) == ["developers", "disciplines", "managers"]
    assert sorted(filters["managers"]) == ["alice", "bob"]
    assert filters["developers"] == ["valve"]
    assert sorted(filters["disciplines"]) == ["cs", "dota"]


def test_search_events(client):
    create_event(client, nameEn="Major", discipline="cs", prize="5000")
    create_event(client, nameEn="Minor", discipline="dota", prize="100")

    by_prize = client.get("/searchEvents?prizeMin=1000").get_json()
    assert [e["name"]["en"] for e in by_prize] == ["Major"]

    by_discipline = client.get("/searchEvents", query_string={"disciplines": "'dota'"}).get_json()
    assert [e["name"]["en"] for e in by_discipline] == ["Minor"]

    by_query = client.get("/searchEvents?query=Maj").get_json()
    assert [e["name"]["en"] for e in by_query] == ["Major"]

    assert len(client.get("/searchEvents").get_json()) == 2


def test_get_photo(client):
    create_event(client, data=b"picture-bytes")
    name = client.get("/getAllEvents").get_json()[0]["previewPhoto"]
    response = client.get(f"/getPhoto?id={name}")
    assert response.get_data() == b"picture-bytes"
    response.close()


def test_missing_photo_is_not_found(client):
    assert client.get("/getPhoto?id=absent.png").status_code == 404


def test_create_and_list_users(client):
    response = create_user(client)
    assert response.get_data(as_text=True) == "Юзер успешно добавлен"
    users = client.get("/getAllUsers").get_json()
    assert len(users) == 1
    assert users[0]["mail"] == "ann@example.com"
    assert users[0]["isAdmin"] == 1
    assert users[0]["previewPhoto"].endswith(".jpg")


def test_auth_user(client):
    create_user(client)
    user_id = client.get("/getAllUsers").get_json()[0]["id"]
    password = "password"
    found = client.get("/authUser", query_string={"login": "ann", "password": password}).get_json()
    assert found["id"] == user_id
    wrong = client.get("/authUser", query_string={"login": "ann", "password": "secret"}).get_json()
    assert wrong["id"] == 0


def test_update_and_remove_user(client):
    create_user(client)
    user_id = client.get("/getAllUsers").get_json()[0]["id"]
    form = user_form(id=str(user_id), previewPhoto="same.jpg", company="Globex")
    client.post("/updateUser", data=form)
    user = client.get(f"/getUserById?id={user_id}").get_json()
    assert user["company"] == "Globex"
    assert user["previewPhoto"] == "same.jpg"

    client.post("/removeUser", data={"id": str(user_id)})
    assert client.get("/getAllUsers").get_json() == []


def test_sales_flow(client):
    create_event(client)
    create_user(client)
    event_id = client.get("/getAllEvents").get_json()[0]["id"]
    user_id = client.get("/getAllUsers").get_json()[0]["id"]

    client.post(
        "/addEventToUser",
        data={"userId": str(user_id), "eventId": str(event_id), "time": "777"},
    )
    events = client.get(f"/getUserEvents?userId={user_id}").get_json()
    assert [e["id"] for e in events] == [event_id]

    sales = client.get("/getAllSales").get_json()
    assert len(sales) == 1
    assert sales[0]["userId"] == user_id
    assert sales[0]["eventId"] == event_id
    assert sales[0]["time"] == 777

    client.post("/removeEventFromUser", data={"userId": str(user_id), "eventId": str(event_id)})
    assert client.get(f"/getUserEvents?userId={user_id}").get_json() == []


def test_cors_header_on_cross_origin_request(client):
    with_origin = client.get("/getAllEvents", headers={"Origin": "http://app.example.com"})
    assert with_origin.headers.get("Access-Control-Allow-Origin") == "*"
    without_origin = client.get("/getAllEvents")
    assert "Access-Control-Allow-Origin" not in without_origin.headers


def test_cors_preflight(client):
    allowed = client.options(
        "/createEvent",
        headers={"Origin": "http://app.example.com", "Access-Control-Request-Method": "POST"},
    )
    assert allowed.status_code == 204
    assert allowed.headers.get("Access-Control-Allow-Origin") == "*"

    refused = client.options(
        "/createEvent",
        headers={"Origin": "http://app.example.com", "Access-Control-Request-Method": "PUT"},
    )
    assert "Access-Control-Allow-Origin" not in refused.headers


def test_main_builds_and_runs_app(tmp_path):
    db_file = tmp_path / "main.db"
    static = tmp_path / "photos"
    with mock.patch("flask.Flask.run") as run:
        result = main(["--db", str(db_file), "--static", str(static), "--port", "9000"])
    assert result == 0
    assert run.call_args.kwargs["port"] == 9000
    assert db_file.exists()
    assert static.is_dir()