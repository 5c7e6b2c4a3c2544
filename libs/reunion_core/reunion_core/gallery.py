from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence


class PhotoCategory(str, Enum):
    """The closed set of gallery categories."""

    CLASS_DAYS = "Class Days"
    EVENTS = "Events"
    TRIPS = "Trips"
    FAREWELL = "Farewell"
    OTHER = "Other"

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]


CATEGORY_ICONS = {
    PhotoCategory.CLASS_DAYS: "📚",
    PhotoCategory.EVENTS: "🎉",
    PhotoCategory.TRIPS: "🚌",
    PhotoCategory.FAREWELL: "🎓",
    PhotoCategory.OTHER: "📷",
}


def _category_of(photo: Any) -> Optional[str]:
    if isinstance(photo, Mapping):
        value = photo.get("category")
    else:
        value = getattr(photo, "category", None)
    if isinstance(value, PhotoCategory):
        return value.value
    return value


def count_by_category(photos: Sequence[Any]) -> Dict[str, int]:
    """
    Count photos per category, in enumeration order.

    Untagged photos (category None) and unknown tags are not counted
    under any category.
    """
    counts = {category.value: 0 for category in PhotoCategory}
    for photo in photos:
        category = _category_of(photo)
        if category in counts:
            counts[category] += 1
    return counts


def toggle_category(active: Optional[str], selected: str) -> Optional[str]:
    """
    Apply a click on a category button.

    Selecting the active category clears the filter; any other
    category replaces it.
    """
    return None if active == selected else selected


def filter_by_category(photos: Sequence[Any], active: Optional[str]) -> List[Any]:
    if active is None:
        return list(photos)
    return [photo for photo in photos if _category_of(photo) == active]
