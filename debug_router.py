import json
import sys
from specialist_server.config import settings
from specialist_server.specialist_router import (
    RegistryHolder,
    SpecialistRouter,
    TaskContext,
    default_registry,
    load_registry,
)

SAMPLE_REQUESTS = [
    ("Create a hologram effect for characters", TaskContext(multiplayer=False)),
    ("Reduce draw calls in our game", TaskContext()),
    ("Set up multiplayer netcode for battle royale", TaskContext(multiplayer=True)),
]


def main():
    if settings.router_registry_path:
        registry = load_registry(settings.router_registry_path, fallback_id=settings.router_fallback_id)
    else:
        registry = default_registry(fallback_id=settings.router_fallback_id)
    print(f"Registry: {registry!r}")

    router = SpecialistRouter(RegistryHolder(registry), policy=settings.routing_policy())

    requests = SAMPLE_REQUESTS
    if len(sys.argv) > 1:
        requests = [(" ".join(sys.argv[1:]), TaskContext())]

    for description, context in requests:
        print(f"Input: {description}")
        decision = router.route(description, context)
        print(json.dumps(decision.model_dump(mode="json", exclude={"candidates"}), indent=2))


if __name__ == "__main__":
    main()
