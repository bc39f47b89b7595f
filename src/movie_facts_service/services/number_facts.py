"""Number trivia from the Numbers API."""

import httpx

from .content_lookup import ContentLookupError

DEFAULT_TIMEOUT = 5.0

FACT_TYPES = ("trivia", "math", "date", "year")
DEFAULT_FACT_TYPE = "trivia"


def normalize_fact_type(fact_type: str | None) -> str:
    """Map a spoken fact type onto one the API accepts."""
    if fact_type and fact_type.lower() in FACT_TYPES:
        return fact_type.lower()
    return DEFAULT_FACT_TYPE


class NumberFactLookup:
    """Fetches plain-text facts about numbers."""

    def __init__(
        self,
        base_url: str = "http://numbersapi.com",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fact(self, number: str, fact_type: str | None = None) -> str:
        """Return a fact about number.

        Raises:
            ContentLookupError: The API failed or returned nothing
        """
        url = f"{self.base_url}/{number}/{normalize_fact_type(fact_type)}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ContentLookupError(f"Numbers API request failed: {e}") from e

        text = response.text.strip()
        if not text:
            raise ContentLookupError(f"Numbers API returned no fact for {number}")
        return text
