import asyncio
import logging

import httpx

from pokedex.exceptions import APIClientError
from pokedex.models import TranslationStyle

logger = logging.getLogger(__name__)

API_TOKEN_HEADER = "X-Funtranslations-Api-Secret"


class TranslationClient:
    BASE_URL = "https://api.funtranslations.com/translate"

    def __init__(self, base_url: str = BASE_URL, api_token: str | None = None, timeout: float = 5.0):
        headers = {API_TOKEN_HEADER: api_token} if api_token else None
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers)
        self.timeout = timeout

    async def translate(self, text: str, translation_style: TranslationStyle) -> str:
        """Performs the network call and maps every failure to APIClientError. No retries."""
        url = f"/{translation_style.value}"
        logger.info(f"Requesting {translation_style.value} translation for: {text[:30]}...")

        try:
            # httpx timeouts apply per phase, this bounds the whole call
            response = await asyncio.wait_for(self.client.post(url=url, json={"text": text}), timeout=self.timeout)
            response.raise_for_status()

            data = response.json()
            if data["success"]["total"] != 1:
                raise ValueError(f"unexpected success total {data['success']['total']}")
            translated_text = data["contents"]["translated"]
            if not isinstance(translated_text, str) or not translated_text.strip():
                raise ValueError("empty translation")
            return translated_text

        except httpx.HTTPStatusError as e:
            detail = f"Translation API failed with status {e.response.status_code}."
            rate_limited = e.response.status_code == 429
            if rate_limited:
                detail += " Rate limit exceeded."
            logger.error(f"Translation API error: {detail}")
            raise APIClientError(detail=detail, rate_limited=rate_limited)

        except httpx.RequestError as e:
            logger.error(f"Translation API network error: {e!r}")
            raise APIClientError(detail=f"Translation API network error: {e!r}")

        except asyncio.TimeoutError:
            logger.error(f"Translation API call timed out after {self.timeout}s.")
            raise APIClientError(detail=f"Translation API network error: timed out after {self.timeout}s.")

        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Translation API response parsing error: {e!r}")
            raise APIClientError(detail="Translation API returned an unexpected response format.")

    async def close(self):
        """Close the HTTP client (call on app shutdown)."""
        await self.client.aclose()
