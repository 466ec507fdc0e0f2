from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status

from pokedex.config import configure_logging, get_settings
from pokedex.dependencies import build_pokemon_service, get_pokemon_service
from pokedex.models import ErrorResponse, PokemonResult
from pokedex.services import PokemonService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.pokemon_service = build_pokemon_service(settings)
    yield
    await app.state.pokemon_service.close()


app = FastAPI(
    title="Shakespearean Pokedex API",
    description="Pokemon descriptions, translated to Shakespeare or Yoda speak when the translation service allows.",
    lifespan=lifespan,
)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Empty or invalid Pokemon name"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Pokemon not found"},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse, "description": "PokeAPI unavailable"},
}


# {name} never spans a '/', so this route and /pokemon/{name} cannot shadow each other
@app.get(
    "/pokemon/translated/{name}",
    response_model=PokemonResult,
    responses=ERROR_RESPONSES,
    summary="Alias of /pokemon/{name}, kept for older clients",
)
async def get_translated_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Same result as /pokemon/{name}."""
    return await service.resolve(name)


@app.get(
    "/pokemon/{name}",
    response_model=PokemonResult,
    responses=ERROR_RESPONSES,
    summary="Returns Pokemon information with a fun translation of its description",
)
async def get_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """
    Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).
    If the translation service fails the original description is returned instead.
    """
    # Errors (400, 404, 503) are raised as HTTPExceptions by the service and its clients
    return await service.resolve(name)
