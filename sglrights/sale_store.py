"""Storage operations on sales."""

from __future__ import annotations

from .database import Database
from .entities import Sale


def get_all_sales(db: Database) -> list[Sale]:
    with db.connect() as conn:
        rows = conn.execute("SELECT id, eventId, userId, date FROM Sales").fetchall()
    return [
        Sale(id=sale_id, user_id=user_id, event_id=event_id, time=date)
        for sale_id, event_id, user_id, date in rows
    ]