"""
Unit tests for the specialist registry, file loading and snapshot swapping.
"""
import json

import pytest
from pydantic import ValidationError

from specialist_server.specialist_router import (
    Registry,
    RegistryError,
    RegistryHolder,
    SpecialistProfile,
    default_registry,
    load_registry,
)
from specialist_server.specialist_router.catalog import GENERALIST_ID, list_specialists


def test_profile_normalizes_id_and_keywords():
    profile = SpecialistProfile(id="  Graphics ", keywords={"Shader-Graph": 3, "VFX": 2})
    assert profile.id == "graphics"
    assert profile.name == "graphics"
    assert profile.keywords == {"shader graph": 3, "vfx": 2}
    assert profile.max_score == 5


def test_profile_rejects_negative_weight():
    with pytest.raises(ValidationError):
        SpecialistProfile(id="graphics", keywords={"shader": -1})


def test_profile_rejects_blank_keyword():
    with pytest.raises(ValidationError):
        SpecialistProfile(id="graphics", keywords={"!!!": 1})


def test_profile_is_immutable():
    profile = SpecialistProfile(id="graphics")
    with pytest.raises(ValidationError):
        profile.priority = 1


def test_registry_preserves_registration_order(small_registry):
    assert small_registry.ids() == ("generalist", "graphics", "networking")
    assert [p.id for p in small_registry] == ["generalist", "graphics", "networking"]
    assert [p.id for p in small_registry.domain_profiles()] == ["graphics", "networking"]
    assert small_registry.fallback.id == "generalist"
    assert "graphics" in small_registry
    assert small_registry.get("audio") is None


def test_registry_rejects_duplicate_ids():
    with pytest.raises(RegistryError, match="Duplicate"):
        Registry([
            SpecialistProfile(id="generalist"),
            SpecialistProfile(id="graphics"),
            SpecialistProfile(id="GRAPHICS"),
        ])


def test_registry_requires_fallback_when_not_empty():
    with pytest.raises(RegistryError, match="Fallback"):
        Registry([SpecialistProfile(id="graphics")])


def test_registry_rejects_unknown_prerequisite():
    with pytest.raises(RegistryError, match="unknown prerequisite"):
        Registry([
            SpecialistProfile(id="generalist"),
            SpecialistProfile(id="console", prerequisites=["console-devkit"]),
        ])


def test_empty_registry_can_be_built():
    """Routing against it fails; building it does not."""
    registry = Registry([])
    assert len(registry) == 0
    assert registry.fallback is None


def test_default_registry_matches_catalog(unity_registry):
    assert len(unity_registry) == len(list_specialists())
    assert unity_registry.fallback_id == GENERALIST_ID
    assert unity_registry.get("networking").prerequisites == ["multiplayer"]


def test_from_records_wraps_validation_errors():
    with pytest.raises(RegistryError, match="Invalid specialist records"):
        Registry.from_records([{"id": "generalist"}, {"id": "x", "unexpected": True}])


def test_load_registry_from_object_document(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({
        "fallback": "helper",
        "specialists": [
            {"id": "helper"},
            {"id": "audio", "keywords": {"audio": 3}},
        ],
    }), encoding="utf-8")

    registry = load_registry(path)

    assert registry.fallback_id == "helper"
    assert registry.ids() == ("helper", "audio")


def test_load_registry_from_list_document(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps([{"id": "generalist"}, {"id": "ui", "keywords": {"hud": 3}}]))

    registry = load_registry(str(path))

    assert registry.ids() == ("generalist", "ui")


def test_load_registry_missing_file(tmp_path):
    with pytest.raises(RegistryError, match="not found"):
        load_registry(tmp_path / "missing.json")


def test_load_registry_invalid_json(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text("{not json")
    with pytest.raises(RegistryError, match="not valid JSON"):
        load_registry(path)


def test_load_registry_requires_list(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({"specialists": {"id": "generalist"}}))
    with pytest.raises(RegistryError, match="list of specialists"):
        load_registry(path)


def test_holder_swap_returns_previous(small_registry, unity_registry):
    holder = RegistryHolder(small_registry)

    previous = holder.swap(unity_registry)

    assert previous is small_registry
    assert holder.current() is unity_registry


def test_holder_reload_keeps_snapshot_on_failure(small_registry):
    holder = RegistryHolder(small_registry)

    def broken_loader():
        raise RegistryError("boom")

    with pytest.raises(RegistryError):
        holder.reload(broken_loader)

    assert holder.current() is small_registry


def test_holder_reload_installs_new_snapshot(small_registry):
    holder = RegistryHolder(small_registry)

    registry = holder.reload(default_registry)

    assert holder.current() is registry
    assert registry is not small_registry


@pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
def test_profile_rejects_non_finite_weight(weight):
    with pytest.raises(ValidationError):
        SpecialistProfile(id="graphics", keywords={"shader": weight})


@pytest.mark.parametrize("literal", ["NaN", "Infinity"])
def test_load_registry_rejects_non_finite_weight(tmp_path, literal):
    """The JSON loader accepts NaN/Infinity literals; validation must not."""
    path = tmp_path / "registry.json"
    path.write_text(
        '{"specialists": [{"id": "generalist"}, '
        '{"id": "graphics", "keywords": {"shader": %s}}]}' % literal
    )
    with pytest.raises(RegistryError, match="Invalid specialist records"):
        load_registry(path)


def test_load_registry_null_fallback(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({"fallback": None, "specialists": [{"id": "generalist"}]}))
    with pytest.raises(RegistryError, match="non-string fallback"):
        load_registry(path)


def test_load_registry_not_utf8(tmp_path):
    path = tmp_path / "registry.json"
    path.write_bytes(b'[{"id": "gener\xffalist"}]')
    with pytest.raises(RegistryError, match="not valid UTF-8"):
        load_registry(path)


def test_load_registry_directory_path(tmp_path):
    with pytest.raises(RegistryError, match="could not be read"):
        load_registry(tmp_path)
