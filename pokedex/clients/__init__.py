"""Client modules for external API communication."""
from .errors import (
    APIClientError,
    ContentMissingError,
    InvalidInputError,
    NotFoundError,
    RateLimitedError,
    TranslationError,
    TranslationFailedError,
    UpstreamError,
)
from .pokeapi_client import PokeAPIClient
from .translation_client import TranslationClient

__all__ = [
    'PokeAPIClient',
    'TranslationClient',
    'APIClientError',
    'InvalidInputError',
    'NotFoundError',
    'UpstreamError',
    'TranslationError',
    'RateLimitedError',
    'TranslationFailedError',
    'ContentMissingError',
]
