import logging
from pokedex.clients.errors import InvalidInputError
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.models import PokemonRecord, SpeciesDetail, TranslationStyle

logger = logging.getLogger(__name__)

ENGLISH_LANGUAGE_CODE = "en"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_HABITAT = "unknown"


def select_translation_style(habitat: str | None, is_rare: bool) -> TranslationStyle:
    """Rule: rare (legendary) OR habitat is 'cave' -> Yoda. Otherwise -> Shakespeare."""
    is_cave_habitat = habitat is not None and habitat.casefold() == "cave"
    if is_rare or is_cave_habitat:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE


def clean_flavor_text(text: str) -> str:
    # PokeAPI flavor texts are laid out for the games' fixed-width text boxes
    return text.replace("\n", " ").replace("\r", " ").replace("\f", " ")


def extract_english_description(detail: SpeciesDetail) -> str:
    raw_description = next(
        (
            entry.flavor_text
            for entry in detail.flavor_text_entries
            if entry.language.name == ENGLISH_LANGUAGE_CODE
        ),
        None,
    )
    if raw_description is None or not raw_description.strip():
        return DEFAULT_DESCRIPTION
    return clean_flavor_text(raw_description)


class PokemonService:
    def __init__(
        self,
        poke_client: PokeAPIClient,
        yoda_client: TranslationClient,
        shakespeare_client: TranslationClient,
    ):
        self._poke_client = poke_client
        self._translation_clients = {
            TranslationStyle.YODA: yoda_client,
            TranslationStyle.SHAKESPEARE: shakespeare_client,
        }

    async def get_record(self, name: str) -> PokemonRecord:
        """
        Endpoint 1: Fetches the Pokemon and its species data and maps them to the public record.
        Catalog errors (not found, upstream failure) propagate to the caller unchanged.
        """
        if not name or not name.strip():
            raise InvalidInputError("Pokemon name must not be blank.")

        entry = await self._poke_client.fetch_by_name(name)
        detail = await self._poke_client.fetch_detail_by_id(entry.id)

        record = PokemonRecord(
            name=entry.name,
            description=extract_english_description(detail),
            habitat=detail.habitat.name if detail.habitat and detail.habitat.name else DEFAULT_HABITAT,
            is_rare=detail.is_legendary,
        )
        logger.info(
            f"Retrieved Pokemon data: {record.name} (habitat: {record.habitat}, rare: {record.is_rare})",
            extra={"pokemon": record.name},
        )
        return record

    async def get_styled_record(self, name: str) -> PokemonRecord:
        """
        Endpoint 2: Same record, with the description run through the selected translation.
        The translation is best effort: if it fails, the original description is kept.
        """
        record = await self.get_record(name)

        # --- CORE BUSINESS LOGIC: Determine Translation Style ---
        style = select_translation_style(record.habitat, record.is_rare)
        logger.info(
            f"Applying {style.value} translation for {record.name} "
            f"(habitat: {record.habitat}, rare: {record.is_rare})",
            extra={"pokemon": record.name, "service": style.value},
        )

        translated_description = await self._translation_clients[style].translate(record.description)

        if not translated_description:
            logger.info(
                f"Translation unavailable for {record.name}, using original description",
                extra={"pokemon": record.name, "service": style.value},
            )
            return record

        return record.model_copy(update={"description": translated_description})
