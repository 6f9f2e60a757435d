"""
Specialist Router.

Deterministic keyword-weight scoring that maps a free-text Unity development
request to one primary specialist and a few collaborators. No model calls,
no fuzzy matching, no state: route() is a pure function of the request, the
registry snapshot and the policy.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .errors import EmptyRegistry, InvalidRequest
from .normalizer import contains_phrase, normalize_tokens, unmatched_terms
from .prerequisites import unmet_prerequisites
from .registry import Registry, RegistryHolder
from .schemas import (
    CandidateScore,
    DispatchDecision,
    RoutingPolicy,
    RoutingSignal,
    SignalKind,
    SpecialistProfile,
    TaskContext,
    TaskRequest,
)

logger = logging.getLogger(__name__)

DEFAULT_POLICY = RoutingPolicy()


def score_profile(profile: SpecialistProfile, tokens: List[str]) -> Tuple[float, List[str]]:
    """Sum the weights of profile keywords present in ``tokens``.

    Each keyword counts once, however often it occurs.
    """
    matched = [
        keyword for keyword in profile.keywords
        if contains_phrase(tokens, tuple(keyword.split()))
    ]
    return sum(profile.keywords[keyword] for keyword in matched), matched


def _confidence(score: float, profile: SpecialistProfile) -> float:
    if score <= 0 or profile.max_score <= 0:
        return 0.0
    return min(1.0, max(0.0, score / profile.max_score))


def route(
    request: TaskRequest,
    registry: Registry,
    policy: Optional[RoutingPolicy] = None,
) -> DispatchDecision:
    """
    Route a request to a primary specialist plus collaborators.

    Args:
        request: Task description and optional context hints.
        registry: The registry snapshot to score against.
        policy: Thresholds and limits; defaults to DEFAULT_POLICY.

    Raises:
        InvalidRequest: if the description is empty after trimming.
        EmptyRegistry: if the registry has no profiles.
    """
    policy = policy or DEFAULT_POLICY

    if not request.description or not request.description.strip():
        raise InvalidRequest()
    if len(registry) == 0:
        raise EmptyRegistry()

    tokens = normalize_tokens(request.description)
    profiles: Dict[str, SpecialistProfile] = {}
    candidates: List[CandidateScore] = []
    all_matched: List[str] = []

    for profile in registry.domain_profiles():
        score, matched = score_profile(profile, tokens)
        unmet = unmet_prerequisites(profile.prerequisites, request.context, tokens)
        effective = score if not unmet else score * policy.prerequisite_demotion
        profiles[profile.id] = profile
        all_matched.extend(matched)
        candidates.append(
            CandidateScore(
                id=profile.id,
                score=score,
                effective_score=effective,
                matched_keywords=matched,
                eligible=not unmet,
                unmet_prerequisites=unmet,
            )
        )

    def rank_key(candidate: CandidateScore) -> Tuple[float, int, int]:
        return (
            -candidate.effective_score,
            profiles[candidate.id].priority,
            registry.index_of(candidate.id),
        )

    candidates.sort(key=rank_key)
    eligible = [candidate for candidate in candidates if candidate.eligible]
    signals: List[RoutingSignal] = []

    top = eligible[0] if eligible else None
    confidence = _confidence(top.score, profiles[top.id]) if top else 0.0

    if top is not None and top.score > 0 and top.score >= policy.min_primary_score:
        primary = top.id
        fallback_used = False
    else:
        primary = registry.fallback_id
        fallback_used = True
        best = f"best domain score {top.score:g}" if top else "no eligible domain"
        signals.append(
            RoutingSignal(
                kind=SignalKind.LOW_CONFIDENCE,
                detail=(
                    f"low confidence: {best} is below the primary threshold "
                    f"{policy.min_primary_score:g}; routed to {primary!r}"
                ),
            )
        )

    if len(eligible) >= 2:
        first, second = eligible[0], eligible[1]
        if first.score > 0 and second.score > 0 and first.score - second.score <= policy.ambiguity_epsilon:
            signals.append(
                RoutingSignal(
                    kind=SignalKind.AMBIGUOUS_MATCH,
                    detail=(
                        f"{first.id!r} ({first.score:g}) and {second.id!r} ({second.score:g}) "
                        "scored within the ambiguity margin; confirmation may be needed"
                    ),
                    specialists=[first.id, second.id],
                )
            )

    blocked = [candidate.id for candidate in candidates if not candidate.eligible and candidate.score > 0]
    if blocked:
        signals.append(
            RoutingSignal(
                kind=SignalKind.PREREQUISITE_UNMET,
                detail="matched specialists with unmet prerequisites were demoted",
                specialists=blocked,
            )
        )

    leftover = unmatched_terms(tokens, all_matched)
    if leftover:
        signals.append(
            RoutingSignal(
                kind=SignalKind.UNMATCHED_TERMS,
                detail=f"{len(leftover)} term(s) matched no specialist keyword",
                terms=leftover,
            )
        )

    secondary = [
        candidate.id
        for candidate in candidates
        if candidate.id != primary
        and candidate.effective_score > 0
        and candidate.effective_score >= policy.min_secondary_score
    ][: policy.max_secondary]

    logger.debug(
        "Scores for %r: %s",
        request.description[:100],
        [(c.id, c.score, c.effective_score, c.eligible) for c in candidates if c.score > 0],
    )

    return DispatchDecision(
        primary=primary,
        secondary=secondary,
        confidence=confidence,
        fallback_used=fallback_used,
        signals=signals,
        candidates=candidates,
    )


class SpecialistRouter:
    """Routes requests against whatever snapshot the holder currently has."""

    def __init__(self, holder: RegistryHolder, policy: Optional[RoutingPolicy] = None):
        self.holder = holder
        self.policy = policy or DEFAULT_POLICY

    @property
    def registry(self) -> Registry:
        return self.holder.current()

    def route(
        self,
        description: str,
        context: Optional[TaskContext] = None,
    ) -> DispatchDecision:
        """
        Route a single request.

        Raises:
            InvalidRequest: if the description is empty.
            EmptyRegistry: if the current snapshot has no profiles.
        """
        request = TaskRequest(description=description, context=context or TaskContext())
        decision = route(request, self.holder.current(), self.policy)
        logger.info(
            f"Routed {description[:100]!r} -> {decision.primary} "
            f"(confidence={decision.confidence:.2f}, secondary={decision.secondary})"
        )
        return decision


def decision_needs_confirmation(decision: DispatchDecision) -> bool:
    """
    Helper to detect decisions a human should confirm before dispatch.

    True when the router fell back to the generalist or the top two
    specialists were too close to call.
    """
    return decision.low_confidence or decision.ambiguous
