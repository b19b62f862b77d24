"""
Application/Use-Case layer

Der DashboardService berechnet die Kennzahlen und nutzt dafür nur Domain-Objekte.
Er erzeugt einen DashboardState als ViewModel für die ConsoleLmsView.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .domain import Catalog, Course, Role, User


# Feste Anzeigewerte. Dafür gibt es keine Daten im Catalog.
PENDING_GRADING_SUBMISSIONS = 14
SYSTEM_STATUS_TEXT = "Operational (99% Uptime)"


@dataclass(slots=True)
class DashboardState:
    """
    Datenobjekt für die View.
    Welche Felder gefüllt sind, hängt von der Rolle ab.
    """
    role: Role
    user_name: str
    first_name: str

    # Student
    courses_enrolled: int = 0
    courses_completed: int = 0
    pending_assignments: int = 0

    # Teacher
    courses_taught: int = 0
    pending_grading: int = 0

    # Admin
    active_courses: int = 0
    total_users: int = 0
    system_status: str = ""


@dataclass(slots=True)
class CourseRow:
    """Eine Zeile der Kursliste. progress ist None, wenn er nicht angezeigt wird."""
    code: str
    title: str
    instructor: str
    progress: int | None = None


@dataclass(slots=True)
class CourseListState:
    """Datenobjekt für die Kursliste."""
    rows: List[CourseRow] = field(default_factory=list)


class DashboardService:
    """
    Service für die Dashboard-Logik.
    Er liest Daten aus dem Catalog und baut die ViewModels.
    """

    def build_dashboard_state(self, catalog: Catalog, user: User) -> DashboardState:
        """
        Baut den DashboardState je nach Rolle.
        - Student: Kurse, abgeschlossene Kurse, offene Aufgaben
        - Teacher: eigene Kurse, feste Anzahl offener Korrekturen
        - Admin: alle Kurse, alle Nutzer, fester Systemstatus
        """
        state = DashboardState(
            role=user.role,
            user_name=user.name,
            first_name=user.first_name,
        )

        if user.role is Role.student:
            state.courses_enrolled = len(catalog.courses)
            state.courses_completed = catalog.completed_course_count()
            state.pending_assignments = catalog.pending_assignment_count()
        elif user.role is Role.teacher:
            state.courses_taught = len(catalog.courses_taught_by(user.name))
            state.pending_grading = PENDING_GRADING_SUBMISSIONS
        elif user.role is Role.admin:
            state.active_courses = len(catalog.courses)
            state.total_users = catalog.user_count()
            state.system_status = SYSTEM_STATUS_TEXT
        else:
            raise ValueError(f"Unbekannte Rolle: {user.role!r}")

        return state

    def build_course_list(self, catalog: Catalog, user: User) -> CourseListState:
        """
        Baut die Kursliste.
        Fortschritt nur für Studierende.
        """
        show_progress = user.role is Role.student
        return CourseListState(rows=[self._course_row(c, show_progress) for c in catalog.courses])

    def _course_row(self, course: Course, show_progress: bool) -> CourseRow:
        return CourseRow(
            code=course.code,
            title=course.title,
            instructor=course.instructor,
            progress=course.progress if show_progress else None,
        )
