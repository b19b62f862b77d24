"""
Domain beinhaltet die Entities + Enums

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Eingabe-Logik.

- Entities sind Dataclasses.
- User, Course, Assignment und Catalog sind unveränderlich (frozen).
- Session ist der einzige veränderbare Zustand der App.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class Role(Enum):
    """Rollen eines Nutzers. Steuern, welche Views erreichbar sind."""
    student = "student"
    teacher = "teacher"
    admin = "admin"


class AssignmentStatus(Enum):
    """Status einer Aufgabe."""
    pending = "pending"
    submitted = "submitted"


class ViewName(Enum):
    """
    Die sechs Views der Navigation.
    'logout' ist der Endzustand.
    """
    dashboard = "dashboard"
    courses = "courses"
    assignments = "assignments"
    ai_tutor = "ai-tutor"
    lesson_architect = "lesson-architect"
    logout = "logout"

    @property
    def title(self) -> str:
        """Anzeigename für den Kopfbereich, z.B. 'AI TUTOR'."""
        return self.value.upper().replace("-", " ")


@dataclass(frozen=True, slots=True)
class User:
    """
    Ein Nutzer.
    Wird von außen über die E-Mail identifiziert (Schlüssel im Catalog).
    """
    id: int
    name: str
    role: Role

    @property
    def first_name(self) -> str:
        """Erstes Wort des Namens."""
        parts = self.name.split()
        return parts[0] if parts else self.name

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value.upper()})"


@dataclass(frozen=True, slots=True)
class Course:
    """
    Ein Kurs.
    Der Fortschritt ist nur Anzeige und wird nicht aus Aufgaben berechnet.
    """
    id: int
    title: str
    code: str
    instructor: str
    progress: int

    def __post_init__(self) -> None:
        """Prüft den Fortschritt."""
        if not (0 <= self.progress <= 100):
            raise ValueError(f"progress muss im Bereich 0..100 liegen, ist aber {self.progress}.")

    def is_completed(self) -> bool:
        return self.progress == 100


@dataclass(frozen=True, slots=True)
class Assignment:
    """Eine Aufgabe. Das Fälligkeitsdatum bleibt ein Text (YYYY-MM-DD)."""
    id: int
    title: str
    due_date: str
    status: AssignmentStatus

    def is_pending(self) -> bool:
        return self.status == AssignmentStatus.pending


def normalize_email(raw: str) -> str:
    """E-Mail für den Vergleich: ohne Leerzeichen am Rand, klein geschrieben."""
    return raw.strip().casefold()


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Der feste Datenbestand der App.
    Wird einmal beim Start gebaut und danach nur gelesen.

    - users: E-Mail -> User
    - courses / assignments: in Katalog-Reihenfolge
    """
    users: Mapping[str, User]
    courses: Tuple[Course, ...] = ()
    assignments: Tuple[Assignment, ...] = ()

    def __post_init__(self) -> None:
        """Prüft Grundregeln und normalisiert die Schlüssel."""
        if not self.users:
            raise ValueError("Ein Catalog muss mindestens einen Nutzer enthalten.")

        # frozen: Felder nur über object.__setattr__ setzen.
        normalized: Dict[str, User] = {}
        for email, user in self.users.items():
            key = normalize_email(email)
            if key in normalized:
                raise ValueError(f"E-Mail doppelt vergeben: {key}")
            normalized[key] = user
        object.__setattr__(self, "users", normalized)
        object.__setattr__(self, "courses", tuple(self.courses))
        object.__setattr__(self, "assignments", tuple(self.assignments))

    def find_user(self, email: str) -> Optional[User]:
        """
        Sucht einen Nutzer.
        Die Eingabe wird getrimmt und klein geschrieben.
        Kein Treffer -> None.
        """
        return self.users.get(normalize_email(email))

    def user_count(self) -> int:
        return len(self.users)

    def completed_course_count(self) -> int:
        """Anzahl Kurse mit 100% Fortschritt."""
        return sum(1 for c in self.courses if c.is_completed())

    def pending_assignment_count(self) -> int:
        """Anzahl offener Aufgaben."""
        return sum(1 for a in self.assignments if a.is_pending())

    def courses_taught_by(self, instructor: str) -> Tuple[Course, ...]:
        """Kurse, deren Dozent genau diesen Namen trägt."""
        return tuple(c for c in self.courses if c.instructor == instructor)


@dataclass(slots=True)
class Session:
    """
    Zustand einer Sitzung.
    - user: angemeldeter Nutzer oder None
    - view: aktuelle View
    """
    user: Optional[User] = None
    view: ViewName = field(default=ViewName.dashboard)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> None:
        """Meldet einen Nutzer an. Startet immer im Dashboard."""
        self.user = user
        self.view = ViewName.dashboard

    def logout(self) -> Optional[User]:
        """
        Meldet ab.
        Gibt den bisherigen Nutzer zurück (für die Abschiedsmeldung).
        """
        departing = self.user
        self.user = None
        return departing
