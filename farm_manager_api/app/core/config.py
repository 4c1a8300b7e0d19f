"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts in mock mode without any configuration.  To talk
to the hosted record store set ``STORAGE_BACKEND=remote`` together
with the ``RECORDS_*`` variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Farm Manager API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Which storage backend every entity service is bound to.  Either
    # ``mock`` (in-memory lists seeded from ``mock_data_dir``) or
    # ``remote`` (the hosted record store below).
    storage_backend: str = os.getenv("STORAGE_BACKEND", "mock").lower()

    # Hosted record store.  The project id and public key are sent with
    # every request; see ``core.records_client``.
    records_api_url: str = os.getenv("RECORDS_API_URL", "https://api.apper.io/v1")
    records_project_id: str = os.getenv("RECORDS_PROJECT_ID", "")
    records_public_key: str = os.getenv("RECORDS_PUBLIC_KEY", "")
    records_timeout: float = float(os.getenv("RECORDS_TIMEOUT", "15"))

    # Simulated latency for the mock backend, in milliseconds.
    mock_delay_ms: int = int(os.getenv("MOCK_DELAY_MS", "300"))

    # Directory holding one ``<table>.json`` seed file per entity.  An
    # empty value means the fixtures shipped in ``app/data``.
    mock_data_dir: str = os.getenv("MOCK_DATA_DIR", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
