"""
UI layer für die Console

Diese View zeigt die LMS-Ansichten in der Konsole.
- Text formatieren und ausgeben
- Tabellen und Blöcke als ASCII bauen
- Eingaben und Menü anzeigen

Alle Ausgaben laufen über show_message, alle Eingaben über prompt.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .assistants import LessonPlan, TutorResponse
from .domain import Assignment, Role, Session, ViewName
from .service import CourseListState, DashboardState


class ConsoleLmsView:
    """
    View für die Konsole.

    Die _build_*-Methoden liefern nur Text, die render_*-Methoden geben ihn aus.
    """

    BANNER = "========================================="
    ASSIGNMENT_COLUMNS = [
        ("TITLE", 25),
        ("DUE DATE", 15),
        ("STATUS", 10),
    ]

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_welcome(self) -> None:
        self.show_message("\n".join([
            self.BANNER,
            "  Welcome to EduNexus LMS (CLI Version)",
            self.BANNER,
        ]))

    def render_goodbye(self) -> None:
        self.show_message("\n".join([
            self.BANNER,
            "         Application Exited              ",
            self.BANNER,
        ]))

    def render_header(self, session: Session) -> None:
        """Kopfbereich mit Nutzer und aktueller View."""
        view = session.view
        view_text = view.title if isinstance(view, ViewName) else str(view).upper().replace("-", " ")
        self.show_message("\n".join([
            "\n",
            self.BANNER,
            f" Current User: {session.user}",
            f" Current View: {view_text}",
            self.BANNER,
        ]))

    def render_dashboard(self, state: DashboardState) -> None:
        self.show_message(self._build_dashboard(state))

    def render_courses(self, state: CourseListState) -> None:
        self.show_message(self._build_courses(state))

    def render_assignments(self, assignments: Iterable[Assignment]) -> None:
        self.show_message(self._build_assignments(assignments))

    def render_tutor_intro(self) -> None:
        self.show_message("\n--- NEXUS AI TUTOR ---")
        self.show_message("Available Modes: [1] Explain, [2] Quiz, [3] Study Plan")

    def render_tutor_response(self, response: Optional[TutorResponse]) -> None:
        """
        Zeigt die Antwort des Tutors.
        None heißt: unbekannter Modus, nur Fehlermeldung.
        """
        lines = ["\n--- AI RESPONSE ---"]
        if response is None:
            lines.append("[ERROR] Invalid mode selected.")
        else:
            lines.extend(response.lines)
        lines.append("-------------------\n")
        self.show_message("\n".join(lines))

    def render_architect_intro(self) -> None:
        self.show_message("\n--- LESSON ARCHITECT (TEACHER TOOL) ---")

    def render_lesson_plan(self, plan: LessonPlan) -> None:
        self.show_message(self._build_lesson_plan(plan))

    def render_menu(self, role: Role) -> None:
        """
        Zeigt die Navigation.
        Option 4 hängt von der Rolle ab, Admins haben keine.
        """
        lines = [
            "\n--- NAVIGATION ---",
            "1: Dashboard | 2: Courses | 3: Assignments",
        ]
        if role is Role.student:
            lines.append("4: AI Tutor")
        elif role is Role.teacher:
            lines.append("4: Lesson Architect")
        lines.append("0: Logout")
        self.show_message("\n".join(lines))

    def _build_dashboard(self, state: DashboardState) -> str:
        """
        Baut das Dashboard als Text.
        """
        lines: List[str] = ["\n--- DASHBOARD SUMMARY ---"]

        if state.role is Role.student:
            lines.append(
                f"  Hello, {state.first_name}! "
                f"You have {state.pending_assignments} assignments due soon."
            )
            lines.append(f"  - Courses Enrolled: {state.courses_enrolled}")
            lines.append(f"  - Courses Completed: {state.courses_completed}")
            lines.append(f"  - Pending Assignments: {state.pending_assignments}")
        elif state.role is Role.teacher:
            lines.append("  Teacher Dashboard: Focus on grading and planning.")
            lines.append(f"  - Total Courses Taught: {state.courses_taught}")
            lines.append(f"  - Pending Grading: {state.pending_grading} submissions")
        elif state.role is Role.admin:
            lines.append("  Admin Dashboard: System Health Overview.")
            lines.append(f"  - Active Courses: {state.active_courses}")
            lines.append(f"  - Total Users: {state.total_users}")
            lines.append(f"  - System Status: {state.system_status}")

        return "\n".join(lines)

    def _build_courses(self, state: CourseListState) -> str:
        """
        Baut die Kursliste.
        Zeilen ohne progress bekommen keine Fortschrittszeile.
        """
        lines: List[str] = ["\n--- COURSES LIST ---"]
        for row in state.rows:
            lines.append(f"  [{row.code}] {row.title} (Instructor: {row.instructor})")
            if row.progress is not None:
                bar = self._progress_bar(row.progress)
                lines.append(f"     - Progress: {row.progress}% {bar}")
        return "\n".join(lines)

    def _build_assignments(self, assignments: Iterable[Assignment]) -> str:
        """
        Baut die Aufgaben-Tabelle.

        Spalten:
        - Titel
        - Fälligkeitsdatum
        - Status (groß geschrieben)
        """
        cols = self.ASSIGNMENT_COLUMNS
        out = ["\n--- ASSIGNMENTS ---"]
        out.append(" ".join(name.ljust(width) for name, width in cols))

        # Trennlinie zwischen Kopf und Daten
        out.append("-" * 50)

        for a in assignments:
            cells = [a.title, a.due_date, a.status.value.upper()]
            out.append(" ".join(c.ljust(width) for c, (_, width) in zip(cells, cols)))

        return "\n".join(out)

    def _build_lesson_plan(self, plan: LessonPlan) -> str:
        """
        Baut den Unterrichtsplan.
        Die Gesamtzeit im Titel kommt aus den Abschnitten.
        """
        lines = [f"\n--- GENERATED LESSON PLAN ({plan.grade_level} on {plan.topic}) ---"]
        lines.append("1. LEARNING OBJECTIVES:")
        lines.extend(f"   - {o}" for o in plan.objectives)
        lines.append("2. CREATIVE HOOK:")
        lines.append(f"   - {plan.hook}")
        lines.append(f"3. MAIN BREAKDOWN ({plan.total_minutes} Minutes):")
        lines.extend(f"   - {minutes} min: {text}" for minutes, text in plan.breakdown)
        lines.append("4. HOMEWORK ASSIGNMENT:")
        lines.append(f"   - {plan.homework}")
        lines.append("---------------------------------------------------\n")
        return "\n".join(lines)

    def _progress_bar(self, percent: float, length: int = 20) -> str:
        """
        Erstellt einen Fortschrittsbalken.
        - percent wird auf 0..100 begrenzt.
        - █ = gefüllt, ░ = leer.
        """
        p = max(0.0, min(100.0, percent))
        filled = int(round((p / 100.0) * length))
        bar = "█" * filled + "░" * (length - filled)
        return f"[{bar}]"
