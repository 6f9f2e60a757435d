"""
Unit tests for prerequisite capability tags.

Explicit context values decide; unknown context falls back to the request
text.
"""
import pytest

from specialist_server.specialist_router.normalizer import normalize_tokens
from specialist_server.specialist_router.prerequisites import (
    CAPABILITY_TAGS,
    unknown_tags,
    unmet_prerequisites,
)
from specialist_server.specialist_router.schemas import TaskContext


def test_vocabulary_contains_expected_tags():
    assert set(CAPABILITY_TAGS) == {"multiplayer", "mobile", "xr", "render-pipeline"}


def test_unknown_tags():
    assert unknown_tags(["multiplayer", "teleportation"]) == ["teleportation"]


def test_multiplayer_context_true_satisfies():
    tokens = normalize_tokens("Fix the shader")
    assert unmet_prerequisites(["multiplayer"], TaskContext(multiplayer=True), tokens) == []


def test_multiplayer_context_false_wins_over_request_text():
    """The caller said single-player; the request mentioning netcode does not override it."""
    tokens = normalize_tokens("Add netcode for multiplayer")
    unmet = unmet_prerequisites(["multiplayer"], TaskContext(multiplayer=False), tokens)
    assert unmet == ["multiplayer"]


def test_multiplayer_unknown_context_uses_request_signals():
    assert unmet_prerequisites(
        ["multiplayer"], TaskContext(), normalize_tokens("Build a matchmaking lobby")
    ) == []
    assert unmet_prerequisites(
        ["multiplayer"], TaskContext(), normalize_tokens("Build a pause menu")
    ) == ["multiplayer"]


@pytest.mark.parametrize("platform,expected", [
    ("Android", []),
    ("iOS", []),
    ("Windows", ["mobile"]),
])
def test_mobile_platform_context(platform, expected):
    tokens = normalize_tokens("Improve touch controls")
    assert unmet_prerequisites(["mobile"], TaskContext(platform=platform), tokens) == expected


def test_xr_signals_from_request():
    tokens = normalize_tokens("Add hand tracking to the VR scene")
    assert unmet_prerequisites(["xr"], TaskContext(), tokens) == []


def test_render_pipeline_context():
    tokens = normalize_tokens("Custom lighting")
    assert unmet_prerequisites(["render-pipeline"], TaskContext(render_pipeline="URP"), tokens) == []
    assert unmet_prerequisites(["render-pipeline"], TaskContext(), tokens) == ["render-pipeline"]


def test_unknown_tag_is_never_satisfied():
    tokens = normalize_tokens("anything")
    assert unmet_prerequisites(["psychic"], TaskContext(multiplayer=True), tokens) == ["psychic"]
