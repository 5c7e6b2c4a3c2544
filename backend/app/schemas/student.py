from uuid import UUID
from typing import Dict, List, Optional
from pydantic import BaseModel, computed_field

from reunion_core import role_badge


class StudentResponse(BaseModel):
    """Student card in the directory."""

    id: UUID
    name: str
    batch: str
    role: Optional[str] = None
    photo_url: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def badge(self) -> Optional[str]:
        return role_badge(self.role)


class DirectoryFacets(BaseModel):
    """Filter options derived from the student list."""

    batches: List[str]
    roles: List[str]


class DirectoryResponse(BaseModel):
    """Filtered directory listing."""

    students: List[StudentResponse]
    total: int
    shown: int
    facets: DirectoryFacets
    active_filters: Dict[str, str]
    has_active_filters: bool
