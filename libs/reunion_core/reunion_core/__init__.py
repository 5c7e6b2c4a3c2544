# libs/reunion_core/reunion_core/__init__.py

from .directory import (
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
from .gallery import PhotoCategory, count_by_category, filter_by_category, toggle_category
from .loader import LoadState, SectionResult, load_section

__all__ = [
    "ALL",
    "DirectoryFilter",
    "StudentDirectory",
    "StudentRecord",
    "batch_facets",
    "filter_students",
    "matches_search",
    "role_badge",
    "role_facets",
    "PhotoCategory",
    "count_by_category",
    "filter_by_category",
    "toggle_category",
    "LoadState",
    "SectionResult",
    "load_section",
]
