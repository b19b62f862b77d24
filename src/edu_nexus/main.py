"""
Entry point für den EduNexus LMS Prototyp.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .assistants import LessonArchitect, NexusTutor, blocking_delay
from .catalog import InMemoryCatalogRepository
from .config import AppConfig, configure_logging
from .controller import LmsController
from .service import DashboardService
from .view import ConsoleLmsView

logger = logging.getLogger(__name__)


def build_controller(config: AppConfig, view: Optional[ConsoleLmsView] = None) -> LmsController:
    """
    Baut alle Komponenten der App.
    Die Wartezeiten kommen aus der Konfiguration.
    """
    return LmsController(
        repo=InMemoryCatalogRepository(),
        service=DashboardService(),
        view=view or ConsoleLmsView(),
        tutor=NexusTutor(blocking_delay, config.tutor_delay_seconds),
        architect=LessonArchitect(blocking_delay, config.architect_delay_seconds),
    )


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration und Logging
    - Komponenten erstellen
    - Controller starten
    """
    config = AppConfig()
    configure_logging(config)

    try:
        controller = build_controller(config)
        controller.start_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication exited.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
