import pytest
from reunion_core.directory import (
    ALL,
    DirectoryFilter,
    StudentDirectory,
    StudentRecord,
    batch_facets,
    filter_students,
    matches_search,
    role_badge,
    role_facets,
)


@pytest.fixture
def students():
    """Students sorted by name, the way they are fetched."""
    return [
        StudentRecord(id="1", name="Ali Khan", batch="2021-2025", role="CR", bio="Runs to the canteen"),
        StudentRecord(id="2", name="Esha Akbar", batch="2020-2024", email="esha@example.com"),
        StudentRecord(id="3", name="Iqra Aslam", batch="2021-2025", role="GR"),
        StudentRecord(id="4", name="Zoya", batch="2020-2024", role="", bio=None),
    ]


class TestFilterStudents:
    def test_cleared_filter_is_identity(self, students):
        assert filter_students(students, DirectoryFilter()) == students

    def test_filter_is_idempotent(self, students):
        criteria = DirectoryFilter(search="a", batch="2021-2025")
        once = filter_students(students, criteria)
        assert filter_students(once, criteria) == once

    def test_search_is_case_insensitive(self, students):
        lower = filter_students(students, DirectoryFilter(search="ali"))
        upper = filter_students(students, DirectoryFilter(search="ALI"))
        assert lower == upper
        assert [s.name for s in lower] == ["Ali Khan"]

    def test_conjunctive_batch_and_role(self):
        students = [
            StudentRecord(id="1", name="Iqra Aslam", batch="2021-2025", role="GR"),
            StudentRecord(id="2", name="Ali Khan", batch="2021-2025", role="CR"),
        ]
        result = filter_students(students, DirectoryFilter(batch="2021-2025", role="GR"))
        assert [s.name for s in result] == ["Iqra Aslam"]

    def test_search_matches_bio(self, students):
        result = filter_students(students, DirectoryFilter(search="canteen"))
        assert [s.id for s in result] == ["1"]

    def test_search_matches_email(self, students):
        result = filter_students(students, DirectoryFilter(search="@EXAMPLE"))
        assert [s.id for s in result] == ["2"]

    def test_order_is_preserved(self, students):
        result = filter_students(students, DirectoryFilter(search="a"))
        ids = [s.id for s in result]
        assert ids == sorted(ids)

    def test_no_match_returns_empty(self, students):
        assert filter_students(students, DirectoryFilter(search="nobody")) == []

    def test_clear_restores_everything(self, students):
        criteria = DirectoryFilter(search="iqra", batch="2021-2025", role="GR")
        assert len(filter_students(students, criteria)) == 1
        assert filter_students(students, criteria.cleared()) == students


class TestMatchesSearch:
    def test_absent_fields_never_match(self):
        student = StudentRecord(id="1", name="Zoya", batch="2020-2024")
        assert not matches_search(student, "none")

    def test_empty_term_matches(self):
        student = StudentRecord(id="1", name="Zoya", batch="2020-2024")
        assert matches_search(student, "")


class TestFacets:
    def test_batches_sorted_and_distinct(self, students):
        assert batch_facets(students) == ["2020-2024", "2021-2025"]

    def test_roles_skip_empty(self, students):
        assert role_facets(students) == ["CR", "GR"]

    def test_directory_memoizes_facets(self, students):
        directory = StudentDirectory(students)
        assert directory.batches is directory.batches
        assert directory.roles is directory.roles

    def test_for_students_reuses_snapshot(self, students):
        first = StudentDirectory.for_students(students)
        second = StudentDirectory.for_students(list(students))
        assert first is second

        changed = students + [StudentRecord(id="5", name="New", batch="2022-2026")]
        third = StudentDirectory.for_students(changed)
        assert third is not first
        assert "2022-2026" in third.batches

    def test_directory_filter_without_criteria(self, students):
        directory = StudentDirectory(students)
        assert directory.filter() == students
        assert len(directory) == 4


class TestDirectoryFilter:
    def test_default_is_inactive(self):
        assert not DirectoryFilter().is_active
        assert DirectoryFilter().active_filters() == {}

    def test_active_filters(self):
        criteria = DirectoryFilter(search="ali", role="CR")
        assert criteria.is_active
        assert criteria.active_filters() == {"search": "ali", "role": "CR"}
        assert criteria.batch == ALL


class TestStudentRecord:
    def test_from_mapping(self):
        record = StudentRecord.from_source({"id": 7, "name": "Ali", "batch": "2021-2025"})
        assert record.id == "7"
        assert record.role is None

    def test_from_object(self):
        class Row:
            id = "abc"
            name = "Zoya"
            batch = "2020-2024"
            role = "GR"

        record = StudentRecord.from_source(Row())
        assert record.role == "GR"
        assert record.bio is None


@pytest.mark.parametrize(
    "role,badge",
    [("CR", "cr"), ("GR", "gr"), ("Treasurer", "default"), ("Student", None), (None, None), ("", None)],
)
def test_role_badge(role, badge):
    assert role_badge(role) == badge
