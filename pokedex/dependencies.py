from fastapi import Request

from pokedex.clients import PokeAPIClient, TranslationClient
from pokedex.config import Settings
from pokedex.services import PokemonService, ResultCache


def build_pokemon_service(settings: Settings) -> PokemonService:
    poke_client = PokeAPIClient(
        base_url=settings.pokemon_api_base_url,
        timeout=settings.request_timeout,
        language=settings.description_language,
    )
    translation_client = TranslationClient(
        base_url=settings.translation_api_base_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout,
    )
    cache = ResultCache(ttl_seconds=settings.cache_ttl_seconds, max_size=settings.cache_max_size)
    return PokemonService(poke_client=poke_client, translation_client=translation_client, cache=cache)


def get_pokemon_service(request: Request) -> PokemonService:
    # One service (and one cache) per application, built in the lifespan
    return request.app.state.pokemon_service
