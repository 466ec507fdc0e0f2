import pytest
from pydantic import ValidationError
from pokedex.config import Settings


def test_defaults(monkeypatch):
    """Only the port is required; the upstreams default to the public instances."""
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.port == 9000
    assert settings.api_token is None
    assert settings.pokemon_api_base_url == "https://pokeapi.co/api/v2"
    assert settings.translation_api_base_url == "https://api.funtranslations.com/translate"
    assert settings.request_timeout == 5.0
    assert settings.cache_ttl_seconds is None
    assert settings.cache_max_size is None
    assert settings.description_language == "en"


def test_port_is_required(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8000")
    monkeypatch.setenv("API_TOKEN", "s3cret")
    monkeypatch.setenv("POKEMON_API_BASE_URL", "http://pokeapi.local/api/v2")
    monkeypatch.setenv("TRANSLATION_API_BASE_URL", "http://translate.local")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "600")
    monkeypatch.setenv("CACHE_MAX_SIZE", "1000")

    settings = Settings(_env_file=None)

    assert settings.api_token == "s3cret"
    assert settings.pokemon_api_base_url == "http://pokeapi.local/api/v2"
    assert settings.translation_api_base_url == "http://translate.local"
    assert settings.request_timeout == 2.5
    assert settings.cache_ttl_seconds == 600
    assert settings.cache_max_size == 1000


@pytest.mark.parametrize("field, value", [("PORT", "0"), ("PORT", "70000"), ("REQUEST_TIMEOUT", "0")])
def test_invalid_values_are_rejected(monkeypatch, field, value):
    monkeypatch.setenv("PORT", "8000")
    monkeypatch.setenv(field, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
