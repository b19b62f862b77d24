"""
Catalog layer

Hier wird der feste Datenbestand gebaut. Es gibt keine Datei und keine Datenbank,
die Daten liegen als Seed-Mapping im Code. Die Domain bleibt frei von diesen Details.
- CatalogRepository: Schnittstelle (load)
- CatalogMapper: Mapping zwischen Seed-Mapping und Entities
- InMemoryCatalogRepository: Repository über ein Seed-Mapping

Für eine bessere Fehlerbehandlung:
- Enum-Parsing ist tolerant (name/value, Groß/Klein).
- Daten werden beim Laden geprüft.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from .domain import (
    Catalog,
    User,
    Course,
    Assignment,
    Role,
    AssignmentStatus,
)

logger = logging.getLogger(__name__)


# Demo-Daten der App. Das sind auch die Zugangsdaten zum Testen.
DEMO_CATALOG: Dict[str, Any] = {
    "users": {
        "admin@edu.com": {"id": 1, "name": "Admin User", "role": "admin"},
        "sarah@edu.com": {"id": 2, "name": "Sarah Teacher", "role": "teacher"},
        "john@edu.com": {"id": 3, "name": "John Student", "role": "student"},
    },
    "courses": [
        {"id": 1, "title": "Advanced Mathematics", "code": "MATH301", "instructor": "Sarah Teacher", "progress": 75},
        {"id": 2, "title": "World History", "code": "HIST202", "instructor": "Mr. Anderson", "progress": 40},
        {"id": 3, "title": "Physics I", "code": "PHYS101", "instructor": "Dr. Cooper", "progress": 90},
    ],
    "assignments": [
        {"id": 1, "title": "Calculus Quiz", "due_date": "2023-11-25", "status": "pending"},
        {"id": 2, "title": "Linear Algebra Paper", "due_date": "2023-11-28", "status": "submitted"},
        {"id": 3, "title": "WWII Essay", "due_date": "2023-12-01", "status": "pending"},
    ],
}


class CatalogRepository(Protocol):
    """
    Schnittstelle für den Datenbestand.
    """
    def load(self) -> Catalog:
        """Baut den Catalog."""
        ...


class CatalogMapper:
    """
    Wandelt Seed-Mapping -> Catalog.
    - Enums: per name oder value.
    - Parsing ist tolerant, nur die Rolle ist Pflicht.
    """

    def from_mapping(self, d: Mapping[str, Any]) -> Catalog:
        """
        Baut den Catalog aus einem Mapping.
        """
        users = {
            email: self._user_from_dict(u)
            for email, u in d.get("users", {}).items()
        }
        return Catalog(
            users=users,
            courses=tuple(self._course_from_dict(x) for x in d.get("courses", [])),
            assignments=tuple(self._assignment_from_dict(x) for x in d.get("assignments", [])),
        )

    def _parse_enum(self, enum_cls, raw, default=None):
        """
        Parst einen Enum-Wert.

        Wenn nichts passt:
        - default wird zurückgegeben.
        """
        if raw is None:
            return default

        s = str(raw).strip()
        if not s:
            return default

        # Member-Name direkt.
        if s in enum_cls.__members__:
            return enum_cls[s]

        # Vergleich über value.
        for m in enum_cls:
            if str(m.value) == s:
                return m

        # Fallback: case-insensitive.
        low = s.lower()
        for name, m in enum_cls.__members__.items():
            if name.lower() == low:
                return m
        for m in enum_cls:
            if str(m.value).lower() == low:
                return m

        return default

    def _user_from_dict(self, d: Mapping[str, Any]) -> User:
        """
        Mapping für User.
        Ohne gültige Rolle gibt es keinen User.
        """
        role = self._parse_enum(Role, d.get("role"))
        if role is None:
            raise ValueError(f"Unbekannte Rolle für Nutzer {d.get('name')!r}: {d.get('role')!r}")

        return User(
            id=int(d["id"]),
            name=str(d["name"]).strip(),
            role=role,
        )

    def _course_from_dict(self, d: Mapping[str, Any]) -> Course:
        """Mapping für Course."""
        return Course(
            id=int(d["id"]),
            title=d["title"],
            code=str(d.get("code", "")).strip(),
            instructor=d.get("instructor", ""),
            progress=int(d.get("progress", 0)),
        )

    def _assignment_from_dict(self, d: Mapping[str, Any]) -> Assignment:
        """Mapping für Assignment. Unbekannter Status -> pending."""
        return Assignment(
            id=int(d["id"]),
            title=d["title"],
            due_date=str(d.get("due_date", "")).strip(),
            status=self._parse_enum(AssignmentStatus, d.get("status"), AssignmentStatus.pending),
        )


class InMemoryCatalogRepository:
    """
    Repository über ein Seed-Mapping.
    - Ohne Seed werden die Demo-Daten genutzt.
    - CatalogMapper für das Mapping
    """

    def __init__(
        self,
        seed: Optional[Mapping[str, Any]] = None,
        mapper: Optional[CatalogMapper] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._seed = DEMO_CATALOG if seed is None else seed
        self._mapper = mapper or CatalogMapper()

    def load(self) -> Catalog:
        """
        Baut die Domain-Objekte aus dem Seed.
        """
        catalog = self._mapper.from_mapping(self._seed)
        logger.debug(
            "Catalog geladen: %d Nutzer, %d Kurse, %d Aufgaben",
            catalog.user_count(), len(catalog.courses), len(catalog.assignments),
        )
        return catalog
