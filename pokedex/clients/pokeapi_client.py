import httpx
import logging
import re
from urllib.parse import quote
from pydantic import ValidationError
from pokedex.clients.errors import InvalidInputError, NotFoundError, UpstreamError
from pokedex.models import SpeciesDetail, SpeciesEntry

logger = logging.getLogger(__name__)

# PokeAPI resource names are lower-case letters, digits and hyphens
VALID_NAME = re.compile(r"[a-z0-9-]+")


class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"
    TIMEOUT = 30.0

    def __init__(self, base_url: str = BASE_URL, timeout: float = TIMEOUT):
        # One pooled connection set for the catalog, reused across requests
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def _get_json(self, url: str, identifier: str | int) -> dict:
        """Single round trip to PokeAPI; maps every failure onto our error kinds."""
        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.info(f"PokeAPI has no entry for '{identifier}'", extra={"pokemon": str(identifier)})
                raise NotFoundError(identifier)
            logger.error(
                f"PokeAPI returned status {e.response.status_code} for '{identifier}'",
                extra={"pokemon": str(identifier), "status_code": e.response.status_code},
            )
            raise UpstreamError(identifier, f"status {e.response.status_code}")
        except httpx.RequestError as e:
            # Network failures/timeouts
            logger.error(f"PokeAPI network error for '{identifier}': {e!r}", extra={"pokemon": str(identifier)})
            raise UpstreamError(identifier, f"network error: {e!r}")
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for '{identifier}'", extra={"pokemon": str(identifier)})
            raise UpstreamError(identifier, "unexpected response format")

    async def fetch_by_name(self, name: str) -> SpeciesEntry:
        """Looks up the base Pokemon entity; its id keys the species lookup."""
        normalized_name = name.strip().lower() if name else ""
        if not normalized_name:
            raise InvalidInputError("Pokemon name must not be blank.")
        if not VALID_NAME.fullmatch(normalized_name):
            # No catalog entry can have this name; don't let it reshape the request URL
            logger.info(f"Rejecting Pokemon name outside the catalog alphabet: {normalized_name!r}")
            raise NotFoundError(normalized_name)

        logger.info(f"Fetching Pokemon: {normalized_name}", extra={"pokemon": normalized_name})
        data = await self._get_json(f"/pokemon/{quote(normalized_name, safe='')}", normalized_name)

        try:
            entry = SpeciesEntry.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed Pokemon payload for '{normalized_name}': {e}")
            raise UpstreamError(normalized_name, "unexpected response format")

        logger.info(f"Retrieved Pokemon: {entry.name} (id {entry.id})", extra={"pokemon": entry.name})
        return entry

    async def fetch_detail_by_id(self, pokemon_id: int) -> SpeciesDetail:
        """Fetches habitat, legendary flag and flavor texts for a Pokemon id."""
        if pokemon_id <= 0:
            raise InvalidInputError(f"Pokemon id must be greater than 0, got {pokemon_id}.")

        logger.info(f"Fetching species data for id {pokemon_id}")
        data = await self._get_json(f"/pokemon-species/{pokemon_id}", pokemon_id)

        try:
            return SpeciesDetail.model_validate(data)
        except ValidationError as e:
            logger.error(f"Malformed species payload for id {pokemon_id}: {e}")
            raise UpstreamError(pokemon_id, "unexpected response format")

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
