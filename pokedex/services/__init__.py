from .pokemon_service import PokemonService, normalize_name
from .result_cache import ResultCache
from .translation_style import select_translation_style

__all__ = [
    'PokemonService',
    'ResultCache',
    'normalize_name',
    'select_translation_style',
]
