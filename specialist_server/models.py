"""
Request and response models for the HTTP API.
"""
from pydantic import BaseModel
from typing import List, Optional

from .specialist_router.schemas import DispatchDecision, SpecialistProfile, TaskContext


class RouteRequest(BaseModel):
    """Raw task description from the calling tool."""
    description: str
    context: Optional[TaskContext] = None


class RouteResponse(DispatchDecision):
    """Dispatch decision plus whether a human should confirm it first."""
    needs_confirmation: bool = False


class SpecialistSummary(BaseModel):
    """Public view of a registered specialist."""
    id: str
    name: str
    description: str
    prerequisites: List[str]
    priority: int
    fallback: bool = False

    @classmethod
    def from_profile(cls, profile: SpecialistProfile, fallback_id: str) -> "SpecialistSummary":
        return cls(
            id=profile.id,
            name=profile.name,
            description=profile.description,
            prerequisites=list(profile.prerequisites),
            priority=profile.priority,
            fallback=profile.id == fallback_id,
        )


class ReloadResponse(BaseModel):
    """Result of swapping in a freshly loaded registry."""
    status: str
    specialists: int
    previous_specialists: int
    fallback: str
