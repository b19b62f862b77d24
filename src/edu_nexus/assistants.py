"""
Simulierte KI-Werkzeuge

- NexusTutor: Erklärung, Quiz oder Lernplan zu einem Thema (für Studierende)
- LessonArchitect: Unterrichtsplan zu Thema und Klassenstufe (für Lehrkräfte)

Es gibt keine echte Textgenerierung. Die Antworten sind feste Vorlagen.
Die Wartezeit ist eine injizierbare Funktion (Delay), damit Tests nicht warten müssen.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Delay = Callable[[float], None]


def blocking_delay(seconds: float) -> None:
    """
    Wartet die angegebene Zeit.
    Ein Strg+C während der Wartezeit wird ignoriert, die Ausgabe folgt trotzdem.
    """
    try:
        time.sleep(seconds)
    except KeyboardInterrupt:
        logger.warning("Wartezeit unterbrochen (%.1fs), Ausgabe folgt trotzdem.", seconds)


class TutorMode(Enum):
    """Modi des AI Tutors. Der Wert ist die Menü-Eingabe."""
    explain = "1"
    quiz = "2"
    study_plan = "3"

    @classmethod
    def from_input(cls, raw: str) -> Optional["TutorMode"]:
        """Eingabe -> Modus. Unbekannt -> None."""
        s = raw.strip()
        for m in cls:
            if m.value == s:
                return m
        return None


@dataclass(slots=True)
class TutorResponse:
    """Antwort des Tutors als Zeilen."""
    mode: TutorMode
    topic: str
    lines: List[str] = field(default_factory=list)


class NexusTutor:
    """
    Der AI Tutor.
    Erst warten, dann die Vorlage zum Modus füllen.
    """

    def __init__(self, delay: Delay = blocking_delay, delay_seconds: float = 2.0) -> None:
        self._delay = delay
        self._delay_seconds = delay_seconds

    def respond(self, mode_input: str, topic: str) -> Optional[TutorResponse]:
        """
        Erzeugt die Antwort.
        - Wartezeit läuft immer, auch bei unbekanntem Modus.
        - Unbekannter Modus -> None (kein Inhalt).
        """
        self._delay(self._delay_seconds)

        mode = TutorMode.from_input(mode_input)
        if mode is None:
            logger.debug("Unbekannter Tutor-Modus: %r", mode_input)
            return None

        if mode is TutorMode.explain:
            lines = self._explain(topic)
        elif mode is TutorMode.quiz:
            lines = self._quiz(topic)
        else:
            lines = self._study_plan(topic)

        return TutorResponse(mode=mode, topic=topic, lines=lines)

    def _explain(self, topic: str) -> List[str]:
        return [
            f"Concept: {topic}",
            f"The AI provides a simple, clear explanation of **{topic}**.",
            "* Key Takeaway 1: Important Fact.",
            "* Key Takeaway 2: Simple Analogy.",
        ]

    def _quiz(self, topic: str) -> List[str]:
        return [
            f"Quiz on: {topic}",
            f"1. What is the main characteristic of {topic}? (A/B/C/D)",
            "2. Who discovered the core concept? (A/B/C/D)",
            "[Answer Key] 1=B, 2=C.",
        ]

    def _study_plan(self, topic: str) -> List[str]:
        return [
            f"3-Day Study Plan for: {topic}",
            "Day 1: 1hr - Read Introduction; 30min - Define Key Terms.",
            "Day 2: 1hr - Practice Problems/Review Examples; 30min - Take Notes.",
            "Day 3: 1hr - Review all material; 30min - Self-Quiz.",
        ]


@dataclass(slots=True)
class LessonPlan:
    """
    Ein Unterrichtsplan.
    breakdown: (Minuten, Beschreibung) pro Abschnitt, Summe ist 60.
    """
    topic: str
    grade_level: str
    objectives: List[str]
    hook: str
    breakdown: List[Tuple[int, str]]
    homework: str

    @property
    def total_minutes(self) -> int:
        return sum(minutes for minutes, _ in self.breakdown)


class LessonArchitect:
    """
    Der Lesson Architect.
    Erst warten, dann die feste Plan-Vorlage füllen.
    """

    def __init__(self, delay: Delay = blocking_delay, delay_seconds: float = 3.0) -> None:
        self._delay = delay
        self._delay_seconds = delay_seconds

    def draft(self, topic: str, grade_level: str) -> LessonPlan:
        """Erzeugt den Plan zu Thema und Klassenstufe."""
        self._delay(self._delay_seconds)

        return LessonPlan(
            topic=topic,
            grade_level=grade_level,
            objectives=[f"Students will be able to define the core concepts of {topic}."],
            hook="Start with a 5-minute video clip or a 'Two Truths and a Lie' game related to the topic.",
            breakdown=[
                (10, "Hook & Objective setting."),
                (30, "Lecture & Guided Practice."),
                (20, "Collaborative small group activity."),
            ],
            homework="Write a 250-word journal entry applying the concept to a real-world scenario.",
        )
