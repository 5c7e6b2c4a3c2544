import logging
from dataclasses import dataclass, fields
from functools import cached_property, lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Sentinel for the batch and role selectors meaning "no filter".
ALL = "all"

# Roles that never get a badge on a directory card.
PLAIN_ROLES = {"Student"}


@dataclass(frozen=True)
class StudentRecord:
    """A student row as seen by the directory."""

    id: str
    name: str
    batch: str
    role: Optional[str] = None
    photo_url: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_source(cls, source: Any) -> "StudentRecord":
        """Build a record from a mapping or any object exposing the same attributes."""
        data = {}
        for field in fields(cls):
            if isinstance(source, Mapping):
                value = source.get(field.name)
            else:
                value = getattr(source, field.name, None)
            data[field.name] = value

        # Identifiers may be UUIDs or ints depending on where the row came from
        data["id"] = str(data["id"])
        return cls(**data)


@dataclass(frozen=True)
class DirectoryFilter:
    """The three independent criteria of the directory page."""

    search: str = ""
    batch: str = ALL
    role: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.batch != ALL or self.role != ALL

    def cleared(self) -> "DirectoryFilter":
        return DirectoryFilter()

    def active_filters(self) -> Dict[str, str]:
        """Active criteria keyed by name, in display order."""
        active = {}
        if self.search:
            active["search"] = self.search
        if self.batch != ALL:
            active["batch"] = self.batch
        if self.role != ALL:
            active["role"] = self.role
        return active


def matches_search(student: StudentRecord, term: str) -> bool:
    """
    Case-insensitive substring match against name, email and bio.

    A record matches if any of the three fields contains the term.
    Absent fields never match; an empty term matches every record.
    """
    needle = term.lower()
    for value in (student.name, student.email, student.bio):
        if value is not None and needle in value.lower():
            return True
    return False


def filter_students(
    students: Sequence[StudentRecord], criteria: DirectoryFilter
) -> List[StudentRecord]:
    """
    Return the ordered subsequence of students satisfying every active criterion.

    Inactive criteria are vacuously true, so a cleared filter returns
    the full collection in its original order.
    """
    return [
        student
        for student in students
        if matches_search(student, criteria.search)
        and (criteria.batch == ALL or student.batch == criteria.batch)
        and (criteria.role == ALL or student.role == criteria.role)
    ]


def batch_facets(students: Iterable[StudentRecord]) -> List[str]:
    """Distinct batch values, sorted for display."""
    return sorted({student.batch for student in students})


def role_facets(students: Iterable[StudentRecord]) -> List[str]:
    """Distinct non-empty role values, sorted for display."""
    return sorted({student.role for student in students if student.role})


def role_badge(role: Optional[str]) -> Optional[str]:
    """Badge variant shown on a directory card, or None when no badge is shown."""
    if not role or role in PLAIN_ROLES:
        return None
    if role == "CR":
        return "cr"
    if role == "GR":
        return "gr"
    return "default"


class StudentDirectory:
    """
    An immutable snapshot of the student list plus its derived facets.

    Facets are computed on first access and kept for the lifetime of the
    snapshot; filtering never touches them.
    """

    def __init__(self, students: Iterable[StudentRecord]):
        self.students: Tuple[StudentRecord, ...] = tuple(students)

    def __len__(self) -> int:
        return len(self.students)

    @cached_property
    def batches(self) -> List[str]:
        logger.debug(f"Computing batch facets for {len(self.students)} students")
        return batch_facets(self.students)

    @cached_property
    def roles(self) -> List[str]:
        logger.debug(f"Computing role facets for {len(self.students)} students")
        return role_facets(self.students)

    def filter(self, criteria: Optional[DirectoryFilter] = None) -> List[StudentRecord]:
        if criteria is None or not criteria.is_active:
            return list(self.students)
        return filter_students(self.students, criteria)

    @classmethod
    def for_students(cls, students: Iterable[StudentRecord]) -> "StudentDirectory":
        """Return a shared directory for this exact snapshot of students."""
        return _cached_directory(tuple(students))


@lru_cache(maxsize=8)
def _cached_directory(students: Tuple[StudentRecord, ...]) -> StudentDirectory:
    return StudentDirectory(students)
