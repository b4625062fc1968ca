"""Storage operations on events."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from typing import Any

from .database import Database
from .entities import Event, I18nText

_EVENT_COLUMNS = (
    "previewPhoto",
    "nameRu",
    "nameEn",
    "nameKz",
    "descriptionRu",
    "descriptionEn",
    "descriptionKz",
    "manager",
    "developer",
    "placeRu",
    "placeEn",
    "placeKz",
    "discipline",
    "startTime",
    "endTime",
    "prize",
)


def _event_values(event: Event) -> tuple[Any, ...]:
    return (
        event.preview_photo,
        event.name.ru,
        event.name.en,
        event.name.kz,
        event.description.ru,
        event.description.en,
        event.description.kz,
        event.manager,
        event.developer,
        event.place.ru,
        event.place.en,
        event.place.kz,
        event.discipline,
        event.start_time,
        event.end_time,
        event.prize,
    )


def _event_from_row(row: Iterable[Any]) -> Event:
    (
        event_id,
        photo,
        name_ru,
        name_en,
        name_kz,
        desc_ru,
        desc_en,
        desc_kz,
        manager,
        developer,
        place_ru,
        place_en,
        place_kz,
        discipline,
        start_time,
        end_time,
        prize,
    ) = row
    return Event(
        id=event_id,
        preview_photo=photo,
        name=I18nText(name_ru, name_en, name_kz),
        description=I18nText(desc_ru, desc_en, desc_kz),
        manager=manager,
        developer=developer,
        place=I18nText(place_ru, place_en, place_kz),
        discipline=discipline,
        start_time=start_time,
        end_time=end_time,
        prize=prize,
    )


def _parse_list(text: str) -> list[str]:
    """Split a comma-separated list of quoted values such as "'a','b'"."""
    items = next(csv.reader([text], quotechar="'", skipinitialspace=True), [])
    values = []
    for item in items:
        item = item.strip()
        if len(item) >= 2 and item[0] == item[-1] == '"':
            item = item[1:-1]
        values.append(item)
    return values


def add_event(db: Database, event: Event) -> int:
    """Insert an event, ignoring its id, and return the id it was given."""
    columns = ", ".join(_EVENT_COLUMNS)
    placeholders = ", ".join("?" for _ in _EVENT_COLUMNS)
    with db.connect() as conn:
        cursor = conn.execute(
            f"INSERT INTO Events ({columns}) VALUES ({placeholders})",
            _event_values(event),
        )
        return cursor.lastrowid


def update_event(db: Database, event: Event) -> None:
    """Overwrite every field of the event with the same id."""
    assignments = ", ".join(f"{column} = ?" for column in _EVENT_COLUMNS)
    with db.connect() as conn:
        conn.execute(
            f"UPDATE Events SET {assignments} WHERE id = ?",
            (*_event_values(event), event.id),
        )


def get_all_events(db: Database) -> list[Event]:
    with db.connect() as conn:
        return [_event_from_row(row) for row in conn.execute("SELECT * FROM Events")]


def search_events(
    db: Database,
    query: str = "",
    disciplines: str = "",
    managers: str = "",
    developers: str = "",
    prize_min: int = 0,
    prize_max: int = 0,
    start_time: int = 0,
    end_time: int = 0,
) -> list[Event]:
    """Return the events matching every given filter.

    List filters take comma-separated quoted values; numeric bounds are
    exclusive and a zero bound is ignored; the query matches any name.
    """
    conditions: list[str] = []
    params: list[Any] = []

    for column, text in (
        ("discipline", disciplines),
        ("manager", managers),
        ("developer", developers),
    ):
        if text:
            values = _parse_list(text)
            conditions.append(f"{column} IN ({', '.join('?' for _ in values)})")
            params.extend(values)

    for column, operator, bound in (
        ("prize", ">", prize_min),
        ("prize", "<", prize_max),
        ("startTime", ">", start_time),
        ("endTime", "<", end_time),
    ):
        if bound:
            conditions.append(f"{column} {operator} ?")
            params.append(bound)

    if query:
        conditions.append("(nameRu LIKE ? OR nameEn LIKE ? OR nameKz LIKE ?)")
        params.extend([f"%{query}%"] * 3)

    sql = "SELECT * FROM Events"
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)

    with db.connect() as conn:
        return [_event_from_row(row) for row in conn.execute(sql, params)]


def get_event_by_id(db: Database, event_id: int) -> Event:
    """Return the event with this id, or an empty event if there is none."""
    with db.connect() as conn:
        row = conn.execute("SELECT * FROM Events WHERE id = ?", (event_id,)).fetchone()
    return _event_from_row(row) if row is not None else Event()


def remove_event(db: Database, event_id: int) -> None:
    with db.connect() as conn:
        conn.execute("DELETE FROM Events WHERE id = ?", (event_id,))


def get_filters(db: Database) -> dict[str, list[str]]:
    """Return the distinct developers, disciplines and managers in use."""
    with db.connect() as conn:

        def distinct(column: str) -> list[str]:
            return [value for (value,) in conn.execute(f"SELECT DISTINCT {column} FROM Events")]

        return {
            "developers": distinct("developer"),
            "disciplines": distinct("discipline"),
            "managers": distinct("manager"),
        }