"""Storage operations on users and their purchased events."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .database import Database
from .entities import Event, User
from .event_store import _EVENT_COLUMNS, _event_from_row

_USER_COLUMNS = (
    "previewPhoto",
    "firstName",
    "lastName",
    "company",
    "mail",
    "phone",
    "isAdmin",
    "login",
    "password",
)


def _user_values(user: User) -> tuple[Any, ...]:
    return (
        user.preview_photo,
        user.first_name,
        user.last_name,
        user.company,
        user.mail,
        user.phone,
        user.is_admin,
        user.login,
        user.password,
    )


def _user_from_row(row: Iterable[Any]) -> User:
    user_id, photo, first, last, company, mail, phone, is_admin, login, secret = row
    return User(
        id=user_id,
        preview_photo=photo,
        first_name=first,
        last_name=last,
        company=company,
        mail=mail,
        phone=phone,
        login=login,
        password=secret,
        is_admin=is_admin,
    )


def add_user(db: Database, user: User) -> int:
    """Insert a user, ignoring its id, and return the id it was given."""
    columns = ", ".join(_USER_COLUMNS)
    placeholders = ", ".join("?" for _ in _USER_COLUMNS)
    with db.connect() as conn:
        cursor = conn.execute(
            f"INSERT INTO Users ({columns}) VALUES ({placeholders})",
            _user_values(user),
        )
        return cursor.lastrowid


def get_all_users(db: Database) -> list[User]:
    with db.connect() as conn:
        return [_user_from_row(row) for row in conn.execute("SELECT * FROM Users")]


def get_user_by_id(db: Database, user_id: int) -> User:
    """Return the user with this id, or an empty user if there is none."""
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM Users WHERE id = ?", (user_id,)).fetchone()
    return _user_from_row(row) if row is not None else User()


def update_user(db: Database, user: User) -> None:
    """Overwrite every field of the user with the same id."""
    assignments = ", ".join(f"{column} = ?" for column in _USER_COLUMNS)
    with db.connect() as conn:
        conn.execute(
            f"UPDATE Users SET {assignments} WHERE id = ?",
            (*_user_values(user), user.id),
        )


def remove_user(db: Database, user_id: int) -> None:
    with db.connect() as conn:
        conn.execute("DELETE FROM Users WHERE id = ?", (user_id,))


def auth_user(db: Database, login: str, password: str) -> User:
    """Return the user with these credentials, or an empty user."""
    with db.connect() as conn:
        row = conn.execute(
            "SELECT * FROM Users WHERE login = ? AND password = ?", (login, password)
        ).fetchone()
    return _user_from_row(row) if row is not None else User()


def add_event_to_user(db: Database, user_id: int, event_id: int, time: int) -> None:
    """Record that the user acquired the event at the given time."""
    with db.connect() as conn:
        conn.execute(
            "INSERT INTO Sales (eventId, userId, date) VALUES (?, ?, ?)",
            (event_id, user_id, time),
        )


def remove_event_from_user(db: Database, user_id: int, event_id: int) -> None:
    with db.connect() as conn:
        conn.execute(
            "DELETE FROM Sales WHERE userId = ? AND eventId = ?", (user_id, event_id)
        )


def get_user_events(db: Database, user_id: int) -> list[Event]:
    """Return the events the user acquired, one per sale."""
    columns = ", ".join(("Events.id", *(f"Events.{c}" for c in _EVENT_COLUMNS)))
    with db.connect() as conn:
        rows = conn.execute(
            f"SELECT {columns} FROM Sales JOIN Events ON Events.id = Sales.eventId "
            "WHERE Sales.userId = ?",
            (user_id,),
        ).fetchall()
    return [_event_from_row(row) for row in rows]