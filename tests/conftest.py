"""
Gemeinsame Fixtures für die Tests.

- ScriptedView: feste Eingabe-Liste statt input(), Ausgaben werden gesammelt
- RecordingDelay: wartet nicht, merkt sich nur die Sekunden
"""

from collections import deque
from typing import Iterable, List

import pytest

from edu_nexus.assistants import LessonArchitect, NexusTutor
from edu_nexus.catalog import InMemoryCatalogRepository
from edu_nexus.controller import LmsController
from edu_nexus.service import DashboardService
from edu_nexus.view import ConsoleLmsView


class ScriptedView(ConsoleLmsView):
    """View mit festen Eingaben. Leere Liste -> EOFError wie bei input()."""

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs = deque(inputs)
        self.prompts: List[str] = []
        self.messages: List[str] = []

    def prompt(self, frage: str) -> str:
        self.prompts.append(frage)
        if not self._inputs:
            raise EOFError("no scripted input left")
        return self._inputs.popleft()

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


class RecordingDelay:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def delay():
    return RecordingDelay()


@pytest.fixture
def catalog():
    return InMemoryCatalogRepository().load()


@pytest.fixture
def make_controller(delay):
    """Baut einen Controller mit ScriptedView und Demo-Catalog."""

    def _make(inputs=(), seed=None):
        view = ScriptedView(inputs)
        controller = LmsController(
            repo=InMemoryCatalogRepository(seed),
            service=DashboardService(),
            view=view,
            tutor=NexusTutor(delay, 2.0),
            architect=LessonArchitect(delay, 3.0),
        )
        return controller, view

    return _make
