import logging
import re

from pokedex.clients.pokeapi_client import DESCRIPTION_UNAVAILABLE, PokeAPIClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.exceptions import APIClientError, InvalidPokemonNameError
from pokedex.models import PokemonResult, TranslationStyle
from pokedex.services.result_cache import ResultCache
from pokedex.services.translation_style import select_translation_style

logger = logging.getLogger(__name__)

# PokeAPI resource names are lowercase slugs (mr-mime, ho-oh, type-null) or numeric ids
POKEMON_NAME_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def normalize_name(raw_name: str) -> str:
    """Cache key and upstream lookup key: 'Charizard' and ' charizard ' are the same Pokemon."""
    return raw_name.strip().lower()


class PokemonService:
    # Service requires both clients and the result cache via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, translation_client: TranslationClient, cache: ResultCache):
        self._poke_client = poke_client
        self._translation_client = translation_client
        self._cache = cache

    async def resolve(self, raw_name: str) -> PokemonResult:
        """
        Returns the Pokemon with the best description available, served from the
        cache when possible. Concurrent requests for the same name share one
        upstream round-trip.
        """
        name = normalize_name(raw_name)
        if not POKEMON_NAME_PATTERN.fullmatch(name):
            raise InvalidPokemonNameError(raw_name)
        return await self._cache.get_or_compute(name, lambda: self._build_result(name))

    async def _build_result(self, name: str) -> PokemonResult:
        # Not found and upstream errors propagate untouched, the cache stores nothing for them
        species_data = await self._poke_client.get_pokemon_species(name)

        description = species_data.description
        if description == DESCRIPTION_UNAVAILABLE:
            # Nothing worth a rate-limited translation call
            logger.info(f"No description for '{name}', skipping translation")
        else:
            description = await self._translate_or_fallback(name, description, select_translation_style(species_data))

        return PokemonResult(
            name=species_data.name,
            description=description,
            is_legendary=species_data.is_legendary,
            habitat=species_data.habitat,
        )

    async def _translate_or_fallback(self, name: str, description: str, translation_style: TranslationStyle) -> str:
        try:
            return await self._translation_client.translate(description, translation_style)
        except APIClientError as e:
            # Degraded success: the original description is still a valid answer
            reason = "rate limited" if e.rate_limited else e.detail
            logger.warning(f"Translation unavailable for '{name}' ({reason}), using original description")
            return description

    async def close(self):
        """Close both upstream clients (call on app shutdown)."""
        await self._poke_client.close()
        await self._translation_client.close()
