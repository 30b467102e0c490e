"""
Runtime configuration and store selection.

Values come from the process environment, optionally seeded from a ``.env``
file via python-dotenv. Variables already set in the shell win over the file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from stockfolio.domain.ports.stock_repository_port import IStockRepository
from stockfolio.infrastructure.persistence.in_memory_repository import InMemoryStockRepository
from stockfolio.infrastructure.persistence.json_file_repository import JsonFileStockRepository

LOGGER = logging.getLogger(__name__)

STORAGE_JSON = "json"
STORAGE_MEMORY = "memory"

DEFAULT_JSON_PATH = "data/stocks.json"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    storage: str = STORAGE_JSON
    json_path: Path = Path(DEFAULT_JSON_PATH)
    create_if_missing: bool = True
    log_level: str = "INFO"

    @staticmethod
    def load(env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from *env*, or from os.environ after reading ``.env``.

        Raises:
            ValueError: if STOCKFOLIO_STORAGE names an unknown backend.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        storage = env.get("STOCKFOLIO_STORAGE", STORAGE_JSON).strip().lower()
        if storage not in (STORAGE_JSON, STORAGE_MEMORY):
            raise ValueError(
                f"STOCKFOLIO_STORAGE must be '{STORAGE_JSON}' or '{STORAGE_MEMORY}', got {storage!r}"
            )
        return Settings(
            storage=storage,
            json_path=Path(env.get("STOCKFOLIO_JSON_PATH", DEFAULT_JSON_PATH)),
            create_if_missing=env.get("STOCKFOLIO_CREATE_IF_MISSING", "true").strip().lower() in _TRUTHY,
            log_level=env.get("STOCKFOLIO_LOG_LEVEL", "INFO"),
        )


def build_repository(settings: Settings) -> IStockRepository:
    """Instantiate the store adapter named by *settings*."""
    if settings.storage == STORAGE_MEMORY:
        LOGGER.info("Using in-memory stock store")
        return InMemoryStockRepository()
    LOGGER.info("Using JSON stock store at %s", settings.json_path)
    return JsonFileStockRepository(settings.json_path, create_if_missing=settings.create_if_missing)
