"""
Pydantic models for specialist routing.

Profiles and decisions are frozen once built so a registry snapshot can be
shared between concurrent routing calls without copying.
"""
import math
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .normalizer import normalize_phrase


class SpecialistProfile(BaseModel):
    """A named domain-expertise unit with matching keywords and prerequisites."""

    id: str = Field(..., description="Unique specialist identifier")
    name: str = Field("", description="Display name")
    description: str = Field("", description="Short description for humans")
    keywords: Dict[str, float] = Field(
        default_factory=dict, description="Keyword or phrase -> relevance weight"
    )
    prerequisites: List[str] = Field(
        default_factory=list, description="Capability tags required for primary assignment"
    )
    priority: int = Field(100, description="Tie-break rank, lower wins")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("specialist id must not be empty")
        return value

    @field_validator("keywords")
    @classmethod
    def _normalize_keywords(cls, value: Dict[str, float]) -> Dict[str, float]:
        normalized: Dict[str, float] = {}
        for keyword, weight in value.items():
            if not math.isfinite(weight) or weight < 0:
                raise ValueError(f"keyword {keyword!r} needs a finite non-negative weight, got {weight}")
            phrase = normalize_phrase(keyword)
            if not phrase:
                raise ValueError(f"keyword {keyword!r} is empty after normalization")
            # Keys that collapse to the same phrase keep the larger weight
            normalized[phrase] = max(weight, normalized.get(phrase, 0.0))
        return normalized

    @field_validator("prerequisites")
    @classmethod
    def _normalize_prerequisites(cls, value: List[str]) -> List[str]:
        return [tag.strip().lower() for tag in value if tag.strip()]

    @model_validator(mode="after")
    def _default_name(self) -> "SpecialistProfile":
        if not self.name:
            object.__setattr__(self, "name", self.id)
        return self

    @property
    def max_score(self) -> float:
        """Highest score a request can earn against this profile."""
        return sum(self.keywords.values())


class TaskContext(BaseModel):
    """Structured project hints supplied by the caller. None means unknown."""

    platform: Optional[str] = None
    render_pipeline: Optional[str] = None
    multiplayer: Optional[bool] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class TaskRequest(BaseModel):
    """A free-text development request plus optional context."""

    description: str
    context: TaskContext = Field(default_factory=TaskContext)

    model_config = ConfigDict(frozen=True)


class SignalKind(str, Enum):
    """Diagnostic signal kinds attached to a decision."""
    LOW_CONFIDENCE = "low_confidence"
    AMBIGUOUS_MATCH = "ambiguous_match"
    PREREQUISITE_UNMET = "prerequisite_unmet"
    UNMATCHED_TERMS = "unmatched_terms"


class RoutingSignal(BaseModel):
    kind: SignalKind
    detail: str
    specialists: List[str] = Field(default_factory=list)
    terms: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class CandidateScore(BaseModel):
    """Per-profile score breakdown, kept on the decision for auditing."""

    id: str
    score: float
    effective_score: float
    matched_keywords: List[str] = Field(default_factory=list)
    eligible: bool = True
    unmet_prerequisites: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DispatchDecision(BaseModel):
    """Result of routing one request."""

    primary: str
    secondary: List[str] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    fallback_used: bool = False
    signals: List[RoutingSignal] = Field(default_factory=list)
    candidates: List[CandidateScore] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def has_signal(self, kind: SignalKind) -> bool:
        return any(signal.kind == kind for signal in self.signals)

    @property
    def ambiguous(self) -> bool:
        return self.has_signal(SignalKind.AMBIGUOUS_MATCH)

    @property
    def low_confidence(self) -> bool:
        return self.has_signal(SignalKind.LOW_CONFIDENCE)


class RoutingPolicy(BaseModel):
    """Thresholds and limits applied by the router."""

    min_primary_score: float = Field(2.0, ge=0.0)
    min_secondary_score: float = Field(1.0, ge=0.0)
    max_secondary: int = Field(3, ge=0)
    ambiguity_epsilon: float = Field(0.5, ge=0.0)
    prerequisite_demotion: float = Field(0.5, ge=0.0, le=1.0)

    model_config = ConfigDict(extra="forbid", frozen=True)
