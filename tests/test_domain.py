import pytest

from edu_nexus.domain import (
    Assignment,
    AssignmentStatus,
    Catalog,
    Course,
    Role,
    Session,
    User,
    ViewName,
)


def test_user_str_and_first_name():
    user = User(3, "John Student", Role.student)
    assert str(user) == "John Student (STUDENT)"
    assert user.first_name == "John"


def test_course_progress_must_be_percent():
    with pytest.raises(ValueError):
        Course(1, "Broken", "BRK101", "Nobody", 101)
    with pytest.raises(ValueError):
        Course(1, "Broken", "BRK101", "Nobody", -1)


def test_catalog_must_not_be_empty():
    with pytest.raises(ValueError):
        Catalog(users={})


def test_catalog_normalizes_email_keys():
    cat = Catalog(users={"  Mixed@Edu.COM ": User(1, "Mia Mixed", Role.admin)})
    assert "mixed@edu.com" in cat.users
    assert cat.find_user("MIXED@edu.com ").name == "Mia Mixed"


def test_catalog_rejects_duplicate_emails():
    with pytest.raises(ValueError):
        Catalog(users={
            "a@edu.com": User(1, "A", Role.admin),
            "A@EDU.COM": User(2, "B", Role.admin),
        })


def test_catalog_queries():
    cat = Catalog(
        users={"t@edu.com": User(1, "Tina Teacher", Role.teacher)},
        courses=[
            Course(1, "Done", "D1", "Tina Teacher", 100),
            Course(2, "Half", "H1", "Tina Teacher", 50),
            Course(3, "Other", "O1", "Someone Else", 100),
        ],
        assignments=[
            Assignment(1, "A", "2024-01-01", AssignmentStatus.pending),
            Assignment(2, "B", "2024-01-02", AssignmentStatus.submitted),
        ],
    )
    assert isinstance(cat.courses, tuple)
    assert cat.completed_course_count() == 2
    assert cat.pending_assignment_count() == 1
    assert [c.code for c in cat.courses_taught_by("Tina Teacher")] == ["D1", "H1"]
    assert cat.courses_taught_by("tina teacher") == ()


def test_session_login_and_logout():
    session = Session()
    assert session.user is None
    assert session.view is ViewName.dashboard

    user = User(1, "Admin User", Role.admin)
    session.view = ViewName.courses
    session.login(user)
    assert session.is_authenticated
    assert session.view is ViewName.dashboard

    assert session.logout() is user
    assert session.user is None
    assert not session.is_authenticated


def test_view_name_title():
    assert ViewName.lesson_architect.title == "LESSON ARCHITECT"
    assert ViewName.ai_tutor.value == "ai-tutor"
