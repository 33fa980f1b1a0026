from fastapi import HTTPException


# Catalog-stage errors carry their own HTTP mapping so they can propagate
# straight to the API boundary.
class InvalidInputError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, identifier: str | int):
        self.identifier = identifier
        super().__init__(status_code=404, detail=f"Pokemon '{identifier}' not found.")


class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")


class UpstreamError(APIClientError):
    """The catalog was unreachable or answered with something we can't use."""

    def __init__(self, identifier: str | int, cause: str):
        self.identifier = identifier
        self.cause = cause
        super().__init__(status_code=503, detail=f"PokeAPI failed for '{identifier}': {cause}")


# Translation-stage errors never reach the API consumer; TranslationClient
# turns them into a missing result after logging them.
class TranslationError(Exception):
    def __init__(self, service: str, message: str, status_code: int | None = None):
        self.service = service
        self.message = message
        self.status_code = status_code
        super().__init__(f"{service} translation failed: {message}")


class RateLimitedError(TranslationError):
    def __init__(self, service: str, status_code: int, message: str):
        super().__init__(service, message, status_code=status_code)


class TranslationFailedError(TranslationError):
    pass


class ContentMissingError(TranslationError):
    def __init__(self, service: str, message: str):
        super().__init__(service, message)
