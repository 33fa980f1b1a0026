from fastapi import Depends, Request
from pokedex.clients import PokeAPIClient, TranslationClient
from pokedex.config import Settings
from pokedex.models import TranslationStyle
from pokedex.services import PokemonService


def build_clients(settings: Settings) -> tuple[PokeAPIClient, TranslationClient, TranslationClient]:
    """Creates the three upstream clients, each with its own connection pool."""
    poke_client = PokeAPIClient(
        base_url=settings.pokeapi_base_url,
        timeout=settings.pokeapi_timeout_seconds,
    )
    yoda_client = TranslationClient(
        TranslationStyle.YODA,
        url=settings.yoda_api_url,
        timeout=settings.translation_timeout_seconds,
    )
    shakespeare_client = TranslationClient(
        TranslationStyle.SHAKESPEARE,
        url=settings.shakespeare_api_url,
        timeout=settings.translation_timeout_seconds,
    )
    return poke_client, yoda_client, shakespeare_client


# Clients are created once in the app lifespan and live on app.state
def get_poke_client(request: Request) -> PokeAPIClient:
    return request.app.state.poke_client

def get_yoda_client(request: Request) -> TranslationClient:
    return request.app.state.yoda_client

def get_shakespeare_client(request: Request) -> TranslationClient:
    return request.app.state.shakespeare_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    yoda_client: TranslationClient = Depends(get_yoda_client),
    shakespeare_client: TranslationClient = Depends(get_shakespeare_client),
) -> PokemonService:
    return PokemonService(
        poke_client=poke_client,
        yoda_client=yoda_client,
        shakespeare_client=shakespeare_client,
    )
