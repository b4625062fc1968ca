"""Domain records exchanged by the service, with their JSON shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class I18nText:
    """A piece of text in Russian, English and Kazakh."""

    ru: str = ""
    en: str = ""
    kz: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"ru": self.ru, "en": self.en, "kk": self.kz}


@dataclass
class Event:
    """A tournament or other event whose rights are on offer."""

    id: int = 0
    preview_photo: str = ""
    name: I18nText = field(default_factory=I18nText)
    description: I18nText = field(default_factory=I18nText)
    manager: str = ""
    developer: str = ""
    place: I18nText = field(default_factory=I18nText)
    discipline: str = ""
    start_time: int = 0
    end_time: int = 0
    prize: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "previewPhoto": self.preview_photo,
            "name": self.name.to_dict(),
            "description": self.description.to_dict(),
            "manager": self.manager,
            "developer": self.developer,
            "place": self.place.to_dict(),
            "discipline": self.discipline,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "prize": self.prize,
        }


@dataclass
class Sale:
    """The link between a user and an event they acquired."""

    id: int = 0
    user_id: int = 0
    event_id: int = 0
    time: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "eventId": self.event_id,
            "time": self.time,
        }


@dataclass
class User:
    """An account of the service."""

    id: int = 0
    preview_photo: str = ""
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    mail: str = ""
    phone: str = ""
    login: str = ""
    password: str = ""
    is_admin: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "previewPhoto": self.preview_photo,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "company": self.company,
            "mail": self.mail,
            "phone": self.phone,
            "login": self.login,
            "password": self.password,
            "isAdmin": self.is_admin,
        }