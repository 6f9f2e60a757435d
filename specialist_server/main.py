"""
Specialist Router Server
Main FastAPI application that routes Unity development tasks to specialists.
"""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .models import ReloadResponse, RouteRequest, RouteResponse, SpecialistSummary
from .specialist_router import (
    EmptyRegistry,
    InvalidRequest,
    Registry,
    RegistryError,
    RegistryHolder,
    SpecialistRouter,
    decision_needs_confirmation,
    default_registry,
    load_registry,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.FileHandler(settings.log_file) if settings.log_file else logging.StreamHandler(),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# Global router instance
specialist_router: Optional[SpecialistRouter] = None


def build_registry() -> Registry:
    """Build a registry from the configured source."""
    if settings.router_registry_path:
        return load_registry(settings.router_registry_path, fallback_id=settings.router_fallback_id)
    return default_registry(fallback_id=settings.router_fallback_id)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global specialist_router

    # Startup
    logger.info("Starting Specialist Router Server...")

    try:
        registry = build_registry()
        specialist_router = SpecialistRouter(
            holder=RegistryHolder(registry),
            policy=settings.routing_policy(),
        )
        logger.info(f"Specialist router initialized with {len(registry)} profiles")
    except Exception as exc:
        logger.error(f"Failed to initialize specialist router: {exc}", exc_info=True)
        specialist_router = None

    yield

    # Shutdown
    logger.info("Shutting down Specialist Router Server...")


# Create FastAPI app
app = FastAPI(
    title="Unity Specialist Router",
    description="Deterministic routing of Unity development tasks to specialist personas",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_router() -> SpecialistRouter:
    if not specialist_router:
        raise HTTPException(status_code=503, detail="Router not available")
    return specialist_router


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Unity Specialist Router",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    if not specialist_router:
        return {"status": "degraded", "router": "unavailable", "specialists": 0}
    registry = specialist_router.registry
    return {
        "status": "healthy" if len(registry) else "degraded",
        "router": "ready",
        "specialists": len(registry),
        "fallback": registry.fallback_id,
    }


@app.post("/route", response_model=RouteResponse)
async def route_task(request: RouteRequest):
    """
    Route a task description to a primary specialist and collaborators.

    - needs_confirmation is set for low-confidence or ambiguous decisions.
    - 400 when the description is empty.
    - 503 when no router or no specialists are available.
    """
    router = _require_router()
    try:
        decision = router.route(request.description, request.context)
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except EmptyRegistry as exc:
        logger.error(f"Routing failed: {exc}")
        raise HTTPException(status_code=503, detail=str(exc))

    needs_confirmation = decision_needs_confirmation(decision)
    if needs_confirmation:
        logger.warning(f"Decision for {request.description[:100]!r} needs confirmation: {decision.primary}")
    return RouteResponse(**decision.model_dump(), needs_confirmation=needs_confirmation)


@app.get("/specialists", response_model=List[SpecialistSummary])
async def list_specialists():
    """List registered specialists in tie-break order."""
    registry = _require_router().registry
    return [SpecialistSummary.from_profile(profile, registry.fallback_id) for profile in registry]


@app.get("/specialists/{specialist_id}", response_model=SpecialistSummary)
async def get_specialist(specialist_id: str):
    """Get one registered specialist."""
    registry = _require_router().registry
    profile = registry.get(specialist_id.lower())
    if not profile:
        raise HTTPException(status_code=404, detail=f"Specialist '{specialist_id}' not found")
    return SpecialistSummary.from_profile(profile, registry.fallback_id)


@app.post("/registry/reload", response_model=ReloadResponse)
async def reload_registry():
    """
    Rebuild the registry from the configured source and swap it in.

    The previous snapshot stays active when loading fails.
    """
    router = _require_router()
    previous = router.registry
    try:
        registry = router.holder.reload(build_registry)
    except RegistryError as exc:
        logger.error(f"Registry reload failed: {exc}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Registry reload failed: {str(exc)}")

    return ReloadResponse(
        status="reloaded",
        specialists=len(registry),
        previous_specialists=len(previous),
        fallback=registry.fallback_id,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "specialist_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload
    )
