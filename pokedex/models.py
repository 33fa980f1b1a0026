from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TranslationStyle(str, Enum):
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"


# Raw PokeAPI payloads (Internal Contract). Only the fields we read are declared;
# anything else in the upstream JSON is ignored.
class NamedResource(BaseModel):
    name: str


class SpeciesEntry(BaseModel):
    """Base entity from /pokemon/{name}; only its id is needed downstream."""
    id: int = Field(gt=0)
    name: str


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource


class SpeciesDetail(BaseModel):
    """Extended entity from /pokemon-species/{id}."""
    habitat: NamedResource | None = None
    is_legendary: bool
    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)


# Public response model shared by both creature endpoints
class PokemonRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    habitat: str
    is_rare: bool = Field(alias="isRare")


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str
    environment: str
