"""
Specialist registry.

A Registry is an immutable snapshot of specialist profiles. It is built once
(from the built-in catalog or a JSON file) and never mutated; hot reload swaps
a whole new snapshot into a RegistryHolder.
"""
import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from .catalog import GENERALIST_ID, list_specialists
from .errors import RegistryError
from .prerequisites import unknown_tags
from .schemas import SpecialistProfile

logger = logging.getLogger(__name__)

_PROFILE_LIST = TypeAdapter(List[SpecialistProfile])


class Registry:
    """Immutable collection of specialist profiles keyed by id."""

    def __init__(
        self,
        profiles: Iterable[SpecialistProfile] = (),
        fallback_id: str = GENERALIST_ID,
    ):
        ordered: Dict[str, SpecialistProfile] = {}
        for profile in profiles:
            if profile.id in ordered:
                raise RegistryError(f"Duplicate specialist id: {profile.id!r}")
            unknown = unknown_tags(profile.prerequisites)
            if unknown:
                raise RegistryError(
                    f"Specialist {profile.id!r} has unknown prerequisite tags: {unknown}"
                )
            ordered[profile.id] = profile

        fallback_id = fallback_id.strip().lower()
        if ordered and fallback_id not in ordered:
            raise RegistryError(f"Fallback specialist {fallback_id!r} is not registered")

        self._profiles = MappingProxyType(ordered)
        self._order: Tuple[str, ...] = tuple(ordered)
        self._fallback_id = fallback_id

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, specialist_id: object) -> bool:
        return specialist_id in self._profiles

    def __iter__(self) -> Iterator[SpecialistProfile]:
        return (self._profiles[specialist_id] for specialist_id in self._order)

    def __repr__(self) -> str:
        return f"Registry({len(self)} profiles, fallback={self._fallback_id!r})"

    def get(self, specialist_id: str) -> Optional[SpecialistProfile]:
        return self._profiles.get(specialist_id)

    def ids(self) -> Tuple[str, ...]:
        """Specialist ids in registration order."""
        return self._order

    def index_of(self, specialist_id: str) -> int:
        return self._order.index(specialist_id)

    @property
    def fallback_id(self) -> str:
        return self._fallback_id

    @property
    def fallback(self) -> Optional[SpecialistProfile]:
        return self._profiles.get(self._fallback_id)

    def domain_profiles(self) -> List[SpecialistProfile]:
        """All profiles except the fallback, in registration order."""
        return [profile for profile in self if profile.id != self._fallback_id]

    @classmethod
    def from_records(
        cls, records: Iterable[Dict[str, Any]], fallback_id: str = GENERALIST_ID
    ) -> "Registry":
        """Validate raw profile records and build a registry."""
        try:
            profiles = _PROFILE_LIST.validate_python(list(records))
        except ValidationError as exc:
            raise RegistryError(f"Invalid specialist records: {exc}") from exc
        return cls(profiles, fallback_id=fallback_id)


def default_registry(fallback_id: str = GENERALIST_ID) -> Registry:
    """Registry built from the built-in Unity catalog."""
    return Registry.from_records(list_specialists(), fallback_id=fallback_id)


def load_registry(path: Union[str, Path], fallback_id: str = GENERALIST_ID) -> Registry:
    """
    Load a registry from a JSON file.

    The document is either a list of profile records or an object with a
    "specialists" list and an optional "fallback" id that overrides
    ``fallback_id``.

    Raises:
        RegistryError: if the file is missing or unreadable, not UTF-8 JSON,
            or fails validation.
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise RegistryError(f"Registry file not found: {path}") from exc
    except OSError as exc:
        raise RegistryError(f"Registry file {path} could not be read: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RegistryError(f"Registry file {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RegistryError(f"Registry file {path} is not valid JSON: {exc}") from exc

    if isinstance(document, dict):
        records = document.get("specialists")
        fallback_id = document.get("fallback", fallback_id)
        if not isinstance(fallback_id, str):
            raise RegistryError(f"Registry file {path} has a non-string fallback: {fallback_id!r}")
    else:
        records = document

    if not isinstance(records, list):
        raise RegistryError(f"Registry file {path} must contain a list of specialists")

    registry = Registry.from_records(records, fallback_id=fallback_id)
    logger.info(f"Loaded {len(registry)} specialist profiles from {path}")
    return registry


class RegistryHolder:
    """
    Holds the active registry snapshot.

    Readers call current() once per routing call and keep that snapshot for
    the whole call; writers replace the snapshot with swap().
    """

    def __init__(self, registry: Registry):
        self._registry = registry
        self._lock = threading.Lock()

    def current(self) -> Registry:
        return self._registry

    def swap(self, registry: Registry) -> Registry:
        """Install a new snapshot and return the previous one."""
        with self._lock:
            previous, self._registry = self._registry, registry
        logger.info(f"Swapped specialist registry: {previous!r} -> {registry!r}")
        return previous

    def reload(self, loader: Callable[[], Registry]) -> Registry:
        """Build a new snapshot with ``loader`` and swap it in.

        If ``loader`` raises, the current snapshot stays active.
        """
        registry = loader()
        self.swap(registry)
        return registry
