import pytest

from edu_nexus import assistants
from edu_nexus.assistants import LessonArchitect, NexusTutor, TutorMode, blocking_delay


def test_explain_mentions_topic_and_takeaways(delay):
    response = NexusTutor(delay, 2.0).respond("1", "Gravity")
    assert response.mode is TutorMode.explain
    text = "\n".join(response.lines)
    assert "Gravity" in text
    assert "* Key Takeaway 1: Important Fact." in text
    assert "* Key Takeaway 2: Simple Analogy." in text
    assert delay.calls == [2.0]


def test_quiz_has_fixed_answer_key(delay):
    response = NexusTutor(delay).respond("2", "Gravity")
    assert response.lines[0] == "Quiz on: Gravity"
    assert "[Answer Key] 1=B, 2=C." in response.lines


def test_study_plan_covers_three_days(delay):
    response = NexusTutor(delay).respond("3", "Gravity")
    assert response.lines[0] == "3-Day Study Plan for: Gravity"
    assert [line.split(":")[0] for line in response.lines[1:]] == ["Day 1", "Day 2", "Day 3"]


@pytest.mark.parametrize("mode", ["9", "", "explain", "0"])
def test_unknown_mode_gives_no_content(delay, mode):
    assert NexusTutor(delay).respond(mode, "Gravity") is None
    # Wartezeit läuft trotzdem
    assert len(delay.calls) == 1


def test_lesson_plan_adds_up_to_an_hour(delay):
    plan = LessonArchitect(delay, 3.0).draft("Photosynthesis", "7th Grade")
    assert plan.total_minutes == 60
    assert [m for m, _ in plan.breakdown] == [10, 30, 20]
    assert "Photosynthesis" in plan.objectives[0]
    assert delay.calls == [3.0]


def test_blocking_delay_swallows_interrupt(monkeypatch):
    def interrupted(seconds):
        raise KeyboardInterrupt

    monkeypatch.setattr(assistants.time, "sleep", interrupted)
    assert blocking_delay(5) is None


def test_blocking_delay_sleeps(monkeypatch):
    slept = []
    monkeypatch.setattr(assistants.time, "sleep", slept.append)
    blocking_delay(2.0)
    assert slept == [2.0]
