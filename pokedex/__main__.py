"""Entry point for python -m pokedex."""

import uvicorn

from pokedex.config import get_settings
from pokedex.main import app


def main() -> None:
    """Run the Pokedex API server."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
