"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIE_FACTS_",
        case_sensitive=False,
    )

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "movie-facts-service"

    # OMDb movie lookup
    omdb_api_key: str = ""  # Free keys at https://www.omdbapi.com/apikey.aspx
    omdb_base_url: str = "https://www.omdbapi.com/"

    # Numbers API trivia lookup
    numbers_api_base_url: str = "http://numbersapi.com"

    # Upper bound for a single external lookup, in seconds
    lookup_timeout: float = 5.0


settings = Settings()
