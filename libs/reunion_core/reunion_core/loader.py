import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    """Lifecycle of a read-only page section."""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class SectionResult:
    """Outcome of loading one section."""

    name: str
    state: LoadState = LoadState.LOADING
    items: List[Any] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True only for a section that loaded and has no rows."""
        return self.state == LoadState.LOADED and not self.items


def load_section(name: str, fetch: Callable[[], Iterable[Any]]) -> SectionResult:
    """
    Run a section's single read and record its outcome.

    An empty result and a failed read are reported as different states.
    Failures are logged and returned, never raised, so sections stay
    independent of each other.
    """
    result = SectionResult(name=name)
    try:
        result.items = list(fetch())
    except Exception as e:
        logger.warning(f"Failed to load section '{name}': {e}")
        result.state = LoadState.FAILED
        result.error = f"Could not load {name} right now. Please try again later."
        return result

    result.state = LoadState.LOADED
    logger.debug(f"Loaded section '{name}' with {len(result.items)} items")
    return result
