import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Depends
from pokedex import __version__
from pokedex.config import Settings, get_settings
from pokedex.dependencies import build_clients, get_pokemon_service
from pokedex.models import HealthResponse, PokemonRecord
from pokedex.observability import setup_logging
from pokedex.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown: configure logging and own the upstream clients."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    clients = build_clients(settings)
    app.state.poke_client, app.state.yoda_client, app.state.shakespeare_client = clients
    logger.info("Pokedex API started")
    try:
        yield
    finally:
        for client in clients:
            await client.close()
        logger.info("Pokedex API shut down")


app = FastAPI(
    title="Pokedex API",
    description="Pokemon lookups with a best-effort fun translation of their description.",
    version=__version__,
    lifespan=lifespan,
)

# Endpoint 1: Basic Pokemon Info
@app.get(
    "/creature/{name}",
    response_model=PokemonRecord,
    summary="Returns basic Pokemon information",
    responses={400: {"description": "Blank name"}, 404: {"description": "Pokemon not found"}},
)
async def get_creature(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches basic information (name, description, habitat, rarity) for a given Pokemon name."""
    # Catalog errors (400, 404, 503) are HTTPExceptions and map themselves
    return await service.get_record(name)


# Endpoint 2: Translated Pokemon Info
@app.get(
    "/creature/styled/{name}",
    response_model=PokemonRecord,
    summary="Returns Pokemon information with fun translation based on rarity/habitat",
    responses={400: {"description": "Blank name"}, 404: {"description": "Pokemon not found"}},
)
async def get_styled_creature(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Applies the translation rule (Yoda for rare/cave, Shakespeare otherwise).

    A failing translation service never fails this endpoint; the original description is returned instead.
    """
    return await service.get_styled_record(name)


@app.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        environment=settings.environment,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pokedex.main:app", host="0.0.0.0", port=8080)
