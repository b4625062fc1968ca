"""SQLite storage location and schema."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS Events (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        previewPhoto TEXT NOT NULL,
        nameRu TEXT NOT NULL,
        nameEn TEXT NOT NULL,
        nameKz TEXT NOT NULL,
        descriptionRu TEXT NOT NULL,
        descriptionEn TEXT NOT NULL,
        descriptionKz TEXT NOT NULL,
        manager TEXT NOT NULL,
        developer TEXT NOT NULL,
        placeRu TEXT NOT NULL,
        placeEn TEXT NOT NULL,
        placeKz TEXT NOT NULL,
        discipline TEXT NOT NULL,
        startTime INTEGER NOT NULL,
        endTime INTEGER NOT NULL,
        prize INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        previewPhoto TEXT NOT NULL,
        firstName TEXT NOT NULL,
        lastName TEXT NOT NULL,
        company TEXT NOT NULL,
        mail TEXT NOT NULL,
        phone TEXT NOT NULL,
        isAdmin INTEGER NOT NULL,
        login TEXT NOT NULL,
        password TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Sales (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        eventId INTEGER NOT NULL,
        userId INTEGER NOT NULL,
        date INTEGER NOT NULL,
        CONSTRAINT fk_eventId FOREIGN KEY (eventId) REFERENCES Events(id),
        CONSTRAINT fk_userId FOREIGN KEY (userId) REFERENCES Users(id)
    )
    """,
)


class Database:
    """A SQLite database file holding events, users and sales."""

    def __init__(self, path: str | os.PathLike[str] = "store.db") -> None:
        self.path = os.fspath(path)

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection that commits on success and is always closed."""
        conn = sqlite3.connect(self.path)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        with self.connect() as conn:
            for statement in _SCHEMA:
                conn.execute(statement)