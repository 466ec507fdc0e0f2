from pokedex.models import SpeciesInfo, TranslationStyle

CAVE_HABITAT = "cave"


def select_translation_style(species: SpeciesInfo) -> TranslationStyle:
    """Rule: Legendary OR Habitat is 'cave' -> Yoda. Otherwise -> Shakespeare."""
    if species.is_legendary or species.habitat == CAVE_HABITAT:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE
