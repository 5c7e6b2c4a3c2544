from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from reunion_core import LoadState


class SectionResponse(BaseModel):
    """One independently loaded page section."""

    state: LoadState
    items: List[Any] = []
    error: Optional[str] = None
    is_empty: bool = False


class HomeResponse(BaseModel):
    """All landing-page sections."""

    sections: Dict[str, SectionResponse]
