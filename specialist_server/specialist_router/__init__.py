"""
Specialist Router module.

Maps a free-text Unity development request to the specialist persona best
suited to own it, using deterministic keyword-weight scoring over an
immutable registry snapshot.
"""
from .errors import EmptyRegistry, InvalidRequest, RegistryError, RoutingError
from .registry import Registry, RegistryHolder, default_registry, load_registry
from .router import SpecialistRouter, decision_needs_confirmation, route
from .schemas import (
    DispatchDecision,
    RoutingPolicy,
    SignalKind,
    SpecialistProfile,
    TaskContext,
    TaskRequest,
)

__all__ = [
    "DispatchDecision",
    "EmptyRegistry",
    "InvalidRequest",
    "Registry",
    "RegistryError",
    "RegistryHolder",
    "RoutingError",
    "RoutingPolicy",
    "SignalKind",
    "SpecialistProfile",
    "SpecialistRouter",
    "TaskContext",
    "TaskRequest",
    "decision_needs_confirmation",
    "default_registry",
    "load_registry",
    "route",
]
