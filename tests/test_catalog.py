import pytest

from edu_nexus.catalog import DEMO_CATALOG, CatalogMapper, InMemoryCatalogRepository
from edu_nexus.domain import AssignmentStatus, Role


def test_demo_catalog_contents(catalog):
    assert catalog.user_count() == 3
    assert catalog.find_user("sarah@edu.com").role is Role.teacher
    assert catalog.find_user("john@edu.com").role is Role.student
    assert catalog.find_user("admin@edu.com").role is Role.admin
    assert [c.code for c in catalog.courses] == ["MATH301", "HIST202", "PHYS101"]
    assert [a.title for a in catalog.assignments] == ["Calculus Quiz", "Linear Algebra Paper", "WWII Essay"]
    assert catalog.pending_assignment_count() == 2
    assert catalog.completed_course_count() == 0


@pytest.mark.parametrize("email", ["john@edu.com", "  john@edu.com  ", "JOHN@EDU.COM"])
def test_find_user_matches_trimmed_casefolded(catalog, email):
    assert catalog.find_user(email).name == "John Student"


@pytest.mark.parametrize("email", ["", "john", "john@edu.co", "jo hn@edu.com", "john@edu.com.x"])
def test_find_user_rejects_non_keys(catalog, email):
    assert catalog.find_user(email) is None


def test_enum_parsing_is_tolerant():
    seed = {
        "users": {"x@edu.com": {"id": 9, "name": "Xena", "role": "TEACHER"}},
        "assignments": [{"id": 1, "title": "Essay", "due_date": "2024-02-01", "status": "weird"}],
    }
    cat = InMemoryCatalogRepository(seed).load()
    assert cat.find_user("x@edu.com").role is Role.teacher
    assert cat.assignments[0].status is AssignmentStatus.pending


def test_unknown_role_is_rejected():
    seed = {"users": {"x@edu.com": {"id": 9, "name": "Xena", "role": "dean"}}}
    with pytest.raises(ValueError):
        CatalogMapper().from_mapping(seed)


def test_empty_seed_is_rejected():
    with pytest.raises(ValueError):
        InMemoryCatalogRepository({"users": {}}).load()


def test_repository_defaults_to_demo_data():
    cat = InMemoryCatalogRepository().load()
    assert set(cat.users) == set(DEMO_CATALOG["users"])
