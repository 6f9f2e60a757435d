"""
Prerequisite capability tags.

A profile can name tags that must hold before it may own a task. Each tag is
checked against the caller's structured context first; when the context does
not say (None), the request text itself is searched for the tag's signal
terms.
"""
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence

from .normalizer import contains_phrase, normalize_phrase
from .schemas import TaskContext

MOBILE_PLATFORMS = frozenset({"android", "ios", "mobile"})
XR_PLATFORMS = frozenset({"quest", "visionos", "openxr", "xr", "vr", "hololens", "magic leap"})


@dataclass(frozen=True)
class CapabilityTag:
    """Context predicate plus request signal terms for one tag."""
    name: str
    from_context: Callable[[TaskContext], Optional[bool]]
    signals: FrozenSet[str]

    def is_satisfied(self, context: TaskContext, tokens: Sequence[str]) -> bool:
        decided = self.from_context(context)
        if decided is not None:
            return decided
        return any(contains_phrase(tokens, tuple(term.split())) for term in self.signals)


def _platform_in(platforms: FrozenSet[str]) -> Callable[[TaskContext], Optional[bool]]:
    def check(context: TaskContext) -> Optional[bool]:
        if context.platform is None:
            return None
        return normalize_phrase(context.platform) in platforms
    return check


def _render_pipeline(context: TaskContext) -> Optional[bool]:
    if context.render_pipeline is None:
        return None
    return bool(context.render_pipeline.strip())


def _signals(*terms: str) -> FrozenSet[str]:
    return frozenset(normalize_phrase(term) for term in terms)


CAPABILITY_TAGS: Dict[str, CapabilityTag] = {
    tag.name: tag
    for tag in (
        CapabilityTag(
            name="multiplayer",
            from_context=lambda context: context.multiplayer,
            signals=_signals(
                "multiplayer", "netcode", "networking", "networked", "online",
                "lobby", "matchmaking", "replication", "dedicated server",
                "co-op", "pvp", "battle royale", "mirror", "photon",
            ),
        ),
        CapabilityTag(
            name="mobile",
            from_context=_platform_in(MOBILE_PLATFORMS),
            signals=_signals("mobile", "android", "ios", "phone", "tablet", "iphone"),
        ),
        CapabilityTag(
            name="xr",
            from_context=_platform_in(XR_PLATFORMS),
            signals=_signals(
                "vr", "ar", "xr", "mixed reality", "virtual reality",
                "augmented reality", "headset", "quest", "openxr", "hand tracking",
            ),
        ),
        CapabilityTag(
            name="render-pipeline",
            from_context=_render_pipeline,
            signals=_signals("urp", "hdrp", "srp", "render pipeline", "scriptable render pipeline"),
        ),
    )
}


def unknown_tags(tags: Sequence[str]) -> List[str]:
    """Tags that are not part of the capability vocabulary."""
    return [tag for tag in tags if tag not in CAPABILITY_TAGS]


def unmet_prerequisites(
    tags: Sequence[str], context: TaskContext, tokens: Sequence[str]
) -> List[str]:
    """Return the tags that the context and request fail to satisfy."""
    unmet: List[str] = []
    for tag in tags:
        capability = CAPABILITY_TAGS.get(tag)
        if capability is None or not capability.is_satisfied(context, tokens):
            unmet.append(tag)
    return unmet
