from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Runtime configuration for the batch rename API.

    Every field can be overridden by an environment variable of the same name,
    e.g. ``TRACE_RENAMES=false`` silences the per-file rename trace.
    """

    # Server binding when launched directly
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8005

    # Batch rename behaviour
    TRACE_RENAMES: bool = True  # Print a trace line per processed file
    REJECT_DUPLICATE_TARGETS: bool = True  # Refuse batches with colliding new names

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
