import asyncio
import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pokedex.exceptions import APIClientError, PokemonNotFoundError
from pokedex.models import SpeciesInfo

logger = logging.getLogger(__name__)

DESCRIPTION_UNAVAILABLE = "Description unavailable."


def clean_flavor_text(text: str) -> str:
    """PokeAPI flavor texts carry hard line breaks and form feeds from the games."""
    return " ".join(text.split())


class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(self, base_url: str = BASE_URL, timeout: float = 5.0, language: str = "en"):
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.timeout = timeout
        self.language = language

    async def _fetch_species_data(self, pokemon_name: str) -> dict:
        """Internal method to fetch raw species data with error handling."""
        # One path segment, whatever the name contains
        url = f"/pokemon-species/{quote(pokemon_name, safe='')}"
        logger.info(f"Fetching species data for Pokemon: {pokemon_name}")

        try:
            # httpx timeouts apply per phase, this bounds the whole call
            response = await asyncio.wait_for(self.client.get(url), timeout=self.timeout)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                # Definitive answer from upstream, the species does not exist
                raise PokemonNotFoundError(pokemon_name)
            detail = f"PokeAPI failed with status {e.response.status_code}."
            rate_limited = e.response.status_code == 429
            if rate_limited:
                detail += " Rate limit exceeded."
            logger.error(f"PokeAPI error: {detail}")
            raise APIClientError(detail=detail, rate_limited=rate_limited)
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error: {e!r}")
            raise APIClientError(detail=f"PokeAPI network error: {e!r}")
        except asyncio.TimeoutError:
            logger.error(f"PokeAPI call timed out after {self.timeout}s.")
            raise APIClientError(detail=f"PokeAPI network error: timed out after {self.timeout}s.")
        except ValueError:
            logger.error("PokeAPI returned a body that is not valid JSON.")
            raise APIClientError(detail="PokeAPI returned an unexpected response format.")

    def _select_description(self, data: dict) -> str:
        # First entry in the configured language wins; entry order is PokeAPI's (oldest game first)
        return next(
            (
                clean_flavor_text(entry["flavor_text"])
                for entry in data.get("flavor_text_entries") or []
                if entry["language"]["name"] == self.language and entry["flavor_text"].strip()
            ),
            DESCRIPTION_UNAVAILABLE,
        )

    async def get_pokemon_species(self, name: str) -> SpeciesInfo:
        """Fetches, processes, and validates the core Pokemon species data."""
        normalized_name = name.strip().lower()
        data = await self._fetch_species_data(normalized_name)

        try:
            return SpeciesInfo(
                name=data["name"].lower(),
                description=self._select_description(data),
                habitat=(data.get("habitat") or {}).get("name"),
                is_legendary=data["is_legendary"],
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logger.error(f"PokeAPI payload for '{normalized_name}' could not be parsed: {e!r}")
            raise APIClientError(detail="PokeAPI returned an unexpected response format.")

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()
