from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TranslationStyle(str, Enum):
    # Values double as the FunTranslations endpoint names
    SHAKESPEARE = "shakespeare"
    YODA = "yoda"


# Species data as fetched from PokeAPI (Internal Contract)
class SpeciesInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    habitat: str | None
    is_legendary: bool


# Model for the final API response, served by both endpoints
class PokemonResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = Field(min_length=1)
    # Keep the Pythonic attribute name but expose the camelCase JSON key
    is_legendary: bool = Field(alias="isLegendary")
    habitat: str | None


class ErrorResponse(BaseModel):
    detail: str
