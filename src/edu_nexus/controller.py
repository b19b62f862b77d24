"""
Controller layer

Der LmsController steuert die App. Er verbindet Catalog, Service, KI-Werkzeuge und View.

Aufgaben:
- Catalog laden
- Anmeldung per E-Mail
- aktuelle View über ConsoleLmsView ausgeben
- Menü anzeigen und Eingaben verarbeiten
- Abmeldung
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .assistants import LessonArchitect, NexusTutor
from .catalog import CatalogRepository
from .domain import Catalog, Role, Session, User, ViewName, normalize_email
from .service import DashboardService
from .view import ConsoleLmsView

logger = logging.getLogger(__name__)


# Eingabe -> Ziel-View. "4" hängt von der Rolle ab und steht nicht hier.
NAVIGATION: Dict[str, ViewName] = {
    "1": ViewName.dashboard,
    "dashboard": ViewName.dashboard,
    "2": ViewName.courses,
    "courses": ViewName.courses,
    "3": ViewName.assignments,
    "assignments": ViewName.assignments,
    "0": ViewName.logout,
    "logout": ViewName.logout,
}

# Rolle -> Werkzeug hinter Option 4. Admins haben keins.
ROLE_TOOLS: Dict[Role, ViewName] = {
    Role.student: ViewName.ai_tutor,
    Role.teacher: ViewName.lesson_architect,
}


class LmsController:
    """
    Hauptcontroller für das LMS.

    Aufgaben:
    - Anmelde-Schleife
    - Menü-Schleife
    - Aufrufe an Service, Werkzeuge und View
    """

    def __init__(
        self,
        repo: CatalogRepository,
        service: DashboardService,
        view: ConsoleLmsView,
        tutor: Optional[NexusTutor] = None,
        architect: Optional[LessonArchitect] = None,
        session: Optional[Session] = None,
    ) -> None:
        """
        Erstellt den Controller.

        - repo: liefert den Catalog
        - service: Kennzahlen für Dashboard und Kursliste
        - view: Ein-/Ausgabe
        - tutor / architect: simulierte KI-Werkzeuge
        """
        self._repo = repo
        self._service = service
        self._view = view
        self._tutor = tutor or NexusTutor()
        self._architect = architect or LessonArchitect()
        self._session = session or Session()
        self._catalog: Optional[Catalog] = None

    @property
    def session(self) -> Session:
        return self._session

    def start_app(self) -> None:
        """
        Startet die Anwendung.

        - Daten laden
        - Anmeldung
        - Menü-Schleife bis Logout
        """
        self.load_catalog()

        self._view.render_welcome()
        self.login()
        self.run_menu()

    def load_catalog(self) -> Catalog:
        """Lädt den Catalog einmalig. Fehler gehen an den Aufrufer."""
        if self._catalog is None:
            self._catalog = self._repo.load()
        return self._catalog

    def login(self) -> User:
        """
        Fragt so lange nach einer E-Mail, bis sie im Catalog steht.
        Kein Limit für Versuche.
        """
        assert self._catalog is not None
        while self._session.user is None:
            raw = self._view.prompt("\nEnter Email (e.g., john@edu.com, sarah@edu.com): ")
            user = self._catalog.find_user(raw)

            if user is None:
                logger.debug("Anmeldung fehlgeschlagen für %r", normalize_email(raw))
                self._view.show_message("[ERROR] Invalid email. Please try again.")
                continue

            self._session.login(user)
            logger.info("Angemeldet: %s", user)
            self._view.show_message(f"\n[SUCCESS] Login successful! Welcome, {user}")

        return self._session.user

    def run_menu(self) -> None:
        """
        Menü-Schleife.
        Jede Runde: Kopf, aktuelle View, Navigation, eine Eingabe.
        Endet nur über Logout.
        """
        assert self._session.user is not None

        # Endlosschleife bis Logout.
        while True:
            self._view.render_header(self._session)

            if self._session.view is ViewName.logout:
                self.logout()
                return

            self.render_current_view()

            self._view.render_menu(self._session.user.role)
            raw = self._view.prompt("Enter option number or view name (e.g., 4 or 'assignments'): ")
            self.handle_input(raw)

    def handle_input(self, raw: str) -> ViewName:
        """
        Wendet eine Navigations-Eingabe an.
        Ungültige Eingaben lassen die View unverändert.
        Gibt die (neue) aktuelle View zurück.
        """
        assert self._session.user is not None
        choice = raw.strip().casefold()

        if choice == "4":
            target = ROLE_TOOLS.get(self._session.user.role)
            if target is None:
                self._view.show_message("[ERROR] Option 4 is not available for your role.")
                return self._session.view
        else:
            target = NAVIGATION.get(choice)
            if target is None:
                self._view.show_message("[ERROR] Invalid option. Please try again.")
                return self._session.view

        logger.debug("Navigation: %s -> %s", self._session.view, target.value)
        self._session.view = target
        return target

    def render_current_view(self) -> None:
        """
        Zeigt die aktuelle View.
        Unbekannte View -> Hinweis und zurück zum Dashboard.
        """
        renderers: Dict[ViewName, Callable[[], None]] = {
            ViewName.dashboard: self.show_dashboard,
            ViewName.courses: self.show_courses,
            ViewName.assignments: self.show_assignments,
            ViewName.ai_tutor: self.show_ai_tutor,
            ViewName.lesson_architect: self.show_lesson_architect,
        }

        renderer = renderers.get(self._session.view)
        if renderer is None:
            logger.debug("Unbekannte View: %r", self._session.view)
            self._view.show_message("[INFO] Unknown view. Returning to Dashboard.")
            self._session.view = ViewName.dashboard
            return

        renderer()

    def show_dashboard(self) -> None:
        """Zeigt die Kennzahlen zur Rolle."""
        assert self._catalog is not None and self._session.user is not None
        try:
            state = self._service.build_dashboard_state(self._catalog, self._session.user)
            self._view.render_dashboard(state)
        except ValueError as e:
            self._view.show_message(f"[ERROR] Dashboard could not be shown: {e}")

    def show_courses(self) -> None:
        """Zeigt alle Kurse. Fortschritt nur für Studierende."""
        assert self._catalog is not None and self._session.user is not None
        state = self._service.build_course_list(self._catalog, self._session.user)
        self._view.render_courses(state)

    def show_assignments(self) -> None:
        """Zeigt alle Aufgaben als Tabelle."""
        assert self._catalog is not None
        self._view.render_assignments(self._catalog.assignments)

    def show_ai_tutor(self) -> None:
        """
        AI Tutor, nur für Studierende.
        - Modus und Thema abfragen
        - Leeres Thema -> Hinweis, keine Antwort
        """
        if not self._require_role(Role.student, "[ACCESS DENIED] AI Tutor is only for students."):
            return

        self._view.render_tutor_intro()
        mode = self._view.prompt("Select mode (1/2/3): ").strip()
        topic = self._view.prompt("Enter the topic: ").strip()

        if not topic:
            self._view.show_message("[INFO] Topic cannot be empty.")
            return

        self._view.show_message("\n[AI] Thinking...")
        response = self._tutor.respond(mode, topic)
        self._view.render_tutor_response(response)

    def show_lesson_architect(self) -> None:
        """
        Lesson Architect, nur für Lehrkräfte.
        - Thema und Klassenstufe abfragen
        - Leeres Thema -> Hinweis, kein Plan
        """
        if not self._require_role(Role.teacher, "[ACCESS DENIED] Lesson Architect is only for teachers."):
            return

        self._view.render_architect_intro()
        topic = self._view.prompt("Enter Lesson Topic: ").strip()
        grade = self._view.prompt("Enter Grade Level (e.g., 10th Grade): ").strip()

        if not topic:
            self._view.show_message("[INFO] Topic cannot be empty.")
            return

        self._view.show_message("\n[AI] Drafting comprehensive lesson plan...")
        plan = self._architect.draft(topic, grade)
        self._view.render_lesson_plan(plan)

    def logout(self) -> None:
        """
        Meldet ab.
        Abschiedsmeldung mit Namen, danach ist die Sitzung leer.
        """
        departing = self._session.logout()
        name = departing.name if departing is not None else "guest"
        logger.info("Abgemeldet: %s", name)
        self._view.show_message(f"\n[LOGOUT] Thank you, {name}. Logging out.")
        self._view.render_goodbye()

    def _require_role(self, role: Role, denied_message: str) -> bool:
        """
        Prüft die Rolle für ein Werkzeug.
        Falsche Rolle -> Meldung und zurück zum Dashboard.
        """
        assert self._session.user is not None
        if self._session.user.role is role:
            return True

        logger.warning("Zugriff verweigert: %s auf %s", self._session.user, self._session.view)
        self._view.show_message(denied_message)
        self._session.view = ViewName.dashboard
        return False
