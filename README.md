# sglrights

A small HTTP service for publishing esports events and selling their rights to
registered users. Events carry names, descriptions and places in Russian,
English and Kazakh; users are linked to events through sales records. All data
lives in a single SQLite file, and uploaded preview photos are stored in a
directory on disk under fresh UUID names that keep the original extension.

## Installation

```
pip install .
```

## Running the server

```
sglrights
```

Options:

- `--db` — SQLite database file (default `store.db`); its tables are created
  if they do not exist yet.
- `--static` — directory for uploaded photos (default `static`); created if
  missing.
- `--host` — address to listen on (default `0.0.0.0`).
- `--port` — port to listen on (default `8090`).

Cross-origin `GET`, `POST` and `HEAD` requests are allowed from any origin, and
preflight requests are answered accordingly.

## Endpoints

Every endpoint reads its fields from the form body or the query string.
Numeric fields that are missing or not integers count as `0`. A request with a
method other than the one listed gets an empty `200` response and does nothing.

Events:

- `POST /createEvent` — multipart form with a `photo` file (a `400` if it is
  missing) and `nameRu`, `nameEn`, `nameKz`, `descriptionRu`,
  `descriptionEn`, `descriptionKz`, `manager`, `developer`, `placeRu`,
  `placeEn`, `placeKz`, `discipline`, `startTime`, `endTime`, `prize`.
- `POST /updateEvent` — the same fields plus `id`; pass `previewPhoto` to keep
  an existing photo name, or a new `photo` file to replace it.
- `POST /removeEvent` — `id`.
- `GET /getAllEvents`, `GET /getEventById?id=...` — an unknown id gives an
  event with every field empty or zero.
- `GET /searchEvents` — optional filters, all combined:
  - `query` matches any part of the Russian, English or Kazakh name;
  - `disciplines`, `managers`, `developers` take comma-separated quoted
    values, e.g. `'CS2','Dota 2'`;
  - `prizeMin`, `prizeMax`, `startTime`, `endTime` are exclusive bounds
    (`prize > prizeMin`, `prize < prizeMax`, `startTime > ...`,
    `endTime < ...`); a bound of `0` is ignored.
- `GET /getEventsFilters` — the distinct `developers`, `disciplines` and
  `managers` in use.
- `GET /getPhoto?id=<file name>` — serves a stored photo, `404` if absent.

Users and sales:

- `POST /createUser` — multipart form with a `photo` file and `firstName`,
  `lastName`, `company`, `mail`, `phone`, `login`, `password`, `isAdmin`.
- `POST /updateUser` — the same fields plus `id`, with `previewPhoto` or
  `photo` as for events.
- `POST /removeUser` — `id`.
- `GET /getAllUsers`, `GET /getUserById?id=...`
- `GET /authUser?login=...&password=...` — the matching user, or a user with
  every field empty or zero.
- `POST /addEventToUser` — `userId`, `eventId`, `time`.
- `POST /removeEventFromUser` — `userId`, `eventId`.
- `GET /getUserEvents?userId=...` — the events the user acquired, one per sale.
- `GET /getAllSales` — every sale as `id`, `userId`, `eventId`, `time`.

JSON uses camelCase keys; localised texts are objects with `ru`, `en` and `kk`.

## Using it as a library

```python
from sglrights.app import create_app

app = create_app("store.db", "static")
app.run(port=8090)
```

The storage functions in `sglrights.event_store`, `sglrights.user_store` and
`sglrights.sale_store` take a `sglrights.database.Database` and work with the
dataclasses `Event`, `I18nText`, `User` and `Sale` in `sglrights.entities`,
each of which has a `to_dict()` giving its JSON shape. `add_event` and
`add_user` return the id the new row was given. `sglrights.photos.save_photo`
stores an upload stream and returns its new file name.

```python
from sglrights.database import Database
from sglrights.entities import Event, I18nText
from sglrights.event_store import add_event, search_events

db = Database("store.db")
db.create_schema()
add_event(db, Event(name=I18nText("Турнир", "Cup", "Турнир"), prize=1000))
print(search_events(db, query="Cup", prize_min=500))
```

## What it does not do

The service has no sessions or access control: any client can call any
endpoint, including those that change or delete data. Passwords are stored and
returned in plain text, and `authUser` only looks a user up by login and
password.

## Tests

```
pip install .[test]
pytest
```