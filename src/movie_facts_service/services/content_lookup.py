"""Movie lookups against the OMDb API."""

import logging
from typing import Protocol

import httpx

from ..models.subject import Subject

logger = logging.getLogger(__name__)

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 5.0

# OMDb fills unknown fields with this marker
OMDB_MISSING = "N/A"


class ContentLookupError(Exception):
    """A lookup could not produce a subject."""


class SubjectNotFound(ContentLookupError):
    """No subject matches the requested name."""

    def __init__(self, name: str):
        super().__init__(f"No match for {name!r}")
        self.name = name


class ContentLookup(Protocol):
    """Resolves a subject name to its facts."""

    async def resolve(self, name: str) -> Subject:
        """Return the best match for name, raising SubjectNotFound if none."""
        ...


class OmdbMovieLookup:
    """ContentLookup backed by the OMDb title search."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.omdbapi.com/",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the lookup.

        Args:
            api_key: OMDb API key
            base_url: OMDb endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the API
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def resolve(self, name: str) -> Subject:
        """Look up a movie by title.

        Args:
            name: Movie title as spoken by the user

        Returns:
            Subject with title, plot, directors and cast

        Raises:
            SubjectNotFound: OMDb has no movie with that title
            ContentLookupError: The API could not be reached or answered badly
        """
        params = {"t": name, "plot": "short", "type": "movie", "apikey": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise ContentLookupError(f"OMDb request failed: {e}") from e
        except ValueError as e:
            raise ContentLookupError("OMDb returned invalid JSON") from e

        if not isinstance(data, dict):
            raise ContentLookupError(f"OMDb returned {type(data).__name__}, expected an object")

        if data.get("Response") == "False":
            logger.info(f"OMDb has no match for '{name}': {data.get('Error')}")
            raise SubjectNotFound(name)

        return Subject(
            name=data.get("Title") or name,
            synopsis=_field(data, "Plot"),
            contributors=_split_names(_field(data, "Director")),
            participants=_split_names(_field(data, "Actors")),
        )


def _field(data: dict, key: str) -> str:
    """Read an OMDb string field, mapping the N/A marker to empty."""
    value = (data.get(key) or "").strip()
    return "" if value == OMDB_MISSING else value


def _split_names(value: str) -> list[str]:
    """Split an OMDb comma-separated name list."""
    return [part.strip() for part in value.split(",") if part.strip()]
