from fastapi import HTTPException, status


class InvalidPokemonNameError(HTTPException):
    def __init__(self, raw_name: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid Pokemon name: {raw_name!r}.",
        )


class PokemonNotFoundError(HTTPException):
    def __init__(self, name: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pokemon '{name}' not found.")


# Raised by both upstream clients for network failures, timeouts, rate limiting,
# unexpected status codes and malformed payloads (always a 503 for the API consumer)
class APIClientError(HTTPException):
    def __init__(self, detail: str, rate_limited: bool = False):
        self.rate_limited = rate_limited
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"External API Error: {detail}",
        )
