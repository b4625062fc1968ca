"""HTTP service exposing events, users, sales and photos."""

from __future__ import annotations

import argparse
import json
import os
import re
from pathlib import Path
from typing import Any

from flask import Flask, Response, abort, request, send_from_directory

from .database import Database
from .entities import Event, I18nText, User
from .event_store import (
    add_event,
    get_all_events,
    get_event_by_id,
    get_filters,
    remove_event,
    search_events,
    update_event,
)
from .photos import save_photo
from .sale_store import get_all_sales
from .user_store import (
    add_event_to_user,
    add_user,
    auth_user,
    get_all_users,
    get_user_by_id,
    get_user_events,
    remove_event_from_user,
    remove_user,
    update_user,
)

_ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]
_CORS_METHODS = ("GET", "POST", "HEAD")
_CORS_HEADERS = ("accept", "content-type", "x-requested-with", "origin")
_INTEGER = re.compile(r"[+-]?\d+")

EVENT_CREATED = "Событие успешно добавлено"
EVENT_UPDATED = "Событие успешно изменено"
USER_ADDED = "Юзер успешно добавлен"


def _value(name: str) -> str:
    """Return a form field, preferring the request body over the query string."""
    if name in request.form:
        return request.form[name]
    return request.args.get(name, "")


def _int_value(name: str) -> int:
    """Return a form field as an integer, or 0 if it is not one."""
    text = _value(name)
    return int(text) if _INTEGER.fullmatch(text) else 0


def _i18n(prefix: str) -> I18nText:
    return I18nText(_value(prefix + "Ru"), _value(prefix + "En"), _value(prefix + "Kz"))


def _json(payload: Any) -> Response:
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return Response(body, mimetype="application/json")


def _text(message: str) -> Response:
    return Response(message, status=200, mimetype="text/plain")


def _empty() -> Response:
    return Response("", status=200)


def _event_from_form(event_id: int, preview_photo: str) -> Event:
    return Event(
        id=event_id,
        preview_photo=preview_photo,
        name=_i18n("name"),
        description=_i18n("description"),
        manager=_value("manager"),
        developer=_value("developer"),
        place=_i18n("place"),
        discipline=_value("discipline"),
        start_time=_int_value("startTime"),
        end_time=_int_value("endTime"),
        prize=_int_value("prize"),
    )


def _user_from_form(user_id: int, preview_photo: str) -> User:
    return User(
        id=user_id,
        preview_photo=preview_photo,
        first_name=_value("firstName"),
        last_name=_value("lastName"),
        company=_value("company"),
        mail=_value("mail"),
        phone=_value("phone"),
        login=_value("login"),
        password=_value("password"),
        is_admin=_int_value("isAdmin"),
    )


def create_app(
    db_path: str | os.PathLike[str] = "store.db",
    static_dir: str | os.PathLike[str] = "static",
) -> Flask:
    """Build the application, creating the schema and the photo directory."""
    db = Database(db_path)
    db.create_schema()
    photos_dir = Path(static_dir).resolve()
    photos_dir.mkdir(parents=True, exist_ok=True)

    app = Flask(__name__)

    def store_upload() -> str:
        upload = request.files.get("photo")
        if upload is None:
            abort(400, description="missing photo")
        return save_photo(photos_dir, upload.filename or "", upload.stream)

    def preview_or_upload() -> str:
        return _value("previewPhoto") or store_upload()

    @app.before_request
    def _preflight() -> Response | None:
        requested_method = request.headers.get("Access-Control-Request-Method")
        if request.method != "OPTIONS" or not requested_method:
            return None
        response = Response(status=204)
        response.headers.add(
            "Vary", "Origin, Access-Control-Request-Method, Access-Control-Request-Headers"
        )
        requested_headers = [
            header.strip().lower()
            for header in request.headers.get("Access-Control-Request-Headers", "").split(",")
            if header.strip()
        ]
        method = requested_method.upper()
        if (
            request.headers.get("Origin")
            and method in _CORS_METHODS
            and all(header in _CORS_HEADERS for header in requested_headers)
        ):
            response.headers["Access-Control-Allow-Origin"] = "*"
            response.headers["Access-Control-Allow-Methods"] = method
            if requested_headers:
                response.headers["Access-Control-Allow-Headers"] = ", ".join(requested_headers)
        return response

    @app.after_request
    def _cors(response: Response) -> Response:
        if request.method == "OPTIONS" and request.headers.get("Access-Control-Request-Method"):
            return response
        response.headers.add("Vary", "Origin")
        if request.headers.get("Origin") and request.method in _CORS_METHODS:
            response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/createEvent", methods=_ANY_METHOD)
    def create_event_view() -> Response:
        if request.method != "POST":
            return _empty()
        add_event(db, _event_from_form(-1, store_upload()))
        return _text(EVENT_CREATED)

    @app.route("/getAllEvents", methods=_ANY_METHOD)
    def get_all_events_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json([event.to_dict() for event in get_all_events(db)])

    @app.route("/getEventById", methods=_ANY_METHOD)
    def get_event_by_id_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json(get_event_by_id(db, _int_value("id")).to_dict())

    @app.route("/removeEvent", methods=_ANY_METHOD)
    def remove_event_view() -> Response:
        if request.method == "POST":
            remove_event(db, _int_value("id"))
        return _empty()

    @app.route("/updateEvent", methods=_ANY_METHOD)
    def update_event_view() -> Response:
        if request.method != "POST":
            return _empty()
        event_id = _int_value("id")
        update_event(db, _event_from_form(event_id, preview_or_upload()))
        return _text(EVENT_UPDATED)

    @app.route("/searchEvents", methods=_ANY_METHOD)
    def search_events_view() -> Response:
        if request.method != "GET":
            return _empty()
        events = search_events(
            db,
            query=_value("query"),
            disciplines=_value("disciplines"),
            managers=_value("managers"),
            developers=_value("developers"),
            prize_min=_int_value("prizeMin"),
            prize_max=_int_value("prizeMax"),
            start_time=_int_value("startTime"),
            end_time=_int_value("endTime"),
        )
        return _json([event.to_dict() for event in events])

    @app.route("/getEventsFilters", methods=_ANY_METHOD)
    def get_events_filters_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json(get_filters(db))

    @app.route("/getPhoto", methods=_ANY_METHOD)
    def get_photo_view() -> Response:
        photo_id = _value("id")
        if not photo_id:
            abort(404)
        return send_from_directory(photos_dir, photo_id)

    @app.route("/createUser", methods=_ANY_METHOD)
    def create_user_view() -> Response:
        if request.method != "POST":
            return _empty()
        add_user(db, _user_from_form(1, store_upload()))
        return _text(USER_ADDED)

    @app.route("/getAllUsers", methods=_ANY_METHOD)
    def get_all_users_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json([user.to_dict() for user in get_all_users(db)])

    @app.route("/getUserById", methods=_ANY_METHOD)
    def get_user_by_id_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json(get_user_by_id(db, _int_value("id")).to_dict())

    @app.route("/updateUser", methods=_ANY_METHOD)
    def update_user_view() -> Response:
        if request.method != "POST":
            return _empty()
        preview_photo = preview_or_upload()
        update_user(db, _user_from_form(_int_value("id"), preview_photo))
        return _text(EVENT_UPDATED)

    @app.route("/removeUser", methods=_ANY_METHOD)
    def remove_user_view() -> Response:
        if request.method == "POST":
            remove_user(db, _int_value("id"))
        return _empty()

    @app.route("/authUser", methods=_ANY_METHOD)
    def auth_user_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json(auth_user(db, _value("login"), _value("password")).to_dict())

    @app.route("/addEventToUser", methods=_ANY_METHOD)
    def add_event_to_user_view() -> Response:
        if request.method != "POST":
            return _empty()
        add_event_to_user(db, _int_value("userId"), _int_value("eventId"), _int_value("time"))
        return _text(USER_ADDED)

    @app.route("/removeEventFromUser", methods=_ANY_METHOD)
    def remove_event_from_user_view() -> Response:
        if request.method != "POST":
            return _empty()
        remove_event_from_user(db, _int_value("userId"), _int_value("eventId"))
        return _text(USER_ADDED)

    @app.route("/getUserEvents", methods=_ANY_METHOD)
    def get_user_events_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json([event.to_dict() for event in get_user_events(db, _int_value("userId"))])

    @app.route("/getAllSales", methods=_ANY_METHOD)
    def get_all_sales_view() -> Response:
        if request.method != "GET":
            return _empty()
        return _json([sale.to_dict() for sale in get_all_sales(db)])

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the service."""
    parser = argparse.ArgumentParser(prog="sglrights", description="Event rights service.")
    parser.add_argument("--db", default="store.db", help="SQLite database file")
    parser.add_argument("--static", default="static", help="directory for uploaded photos")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8090, help="port to listen on")
    args = parser.parse_args(argv)

    app = create_app(args.db, args.static)
    app.run(host=args.host, port=args.port)
    return 0