"""
Einstellungen der App.

Es wird keine Datei und keine Umgebungsvariable gelesen.
Die Werte werden in main() gebaut und an die Bausteine weitergegeben.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Laufzeit-Einstellungen.
    - tutor_delay_seconds: simulierte Wartezeit des AI Tutors
    - architect_delay_seconds: simulierte Wartezeit des Lesson Architects
    - log_level: Level für das Logging (geht auf stderr)
    """
    tutor_delay_seconds: float = 2.0
    architect_delay_seconds: float = 3.0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Prüft die Werte."""
        if self.tutor_delay_seconds < 0 or self.architect_delay_seconds < 0:
            raise ValueError("Wartezeiten dürfen nicht negativ sein.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unbekanntes Log-Level: {self.log_level}")


def configure_logging(config: AppConfig) -> None:
    """Richtet das Logging einmalig ein. Ausgabe auf stderr, stdout bleibt für das Menü."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
