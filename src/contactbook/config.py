"""Settings from the environment (.env supported) and the composition point."""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from contactbook.application import DEFAULT_HISTORY_LIMIT, ContactBookModel
from contactbook.domain import Person
from contactbook.infrastructure import InMemoryAddressBook

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Repo root: from src/contactbook/config.py go up three levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir, first one found wins."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _history_limit(raw: str | None) -> int | None:
    raw = (raw or "").strip().lower()
    if not raw:
        return DEFAULT_HISTORY_LIMIT
    if raw in ("0", "none", "unbounded"):
        return None
    limit = int(raw)
    if limit < 0:
        raise ValueError("CONTACTBOOK_HISTORY_LIMIT must be >= 0.")
    return limit


@dataclass(frozen=True)
class Settings:
    default_region: str | None = None
    history_limit: int | None = DEFAULT_HISTORY_LIMIT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        if environ is None:
            load_env()
            environ = os.environ
        env = environ
        region = env.get("CONTACTBOOK_DEFAULT_REGION", "").strip().upper() or None
        return cls(
            default_region=region,
            history_limit=_history_limit(env.get("CONTACTBOOK_HISTORY_LIMIT")),
            log_level=env.get("CONTACTBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level)


def build_model(
    settings: Settings | None = None, snapshot: Iterable[Person] = ()
) -> ContactBookModel:
    """Create the store and model the command layer runs against.

    A snapshot that breaks uniqueness raises ValueError.
    """
    settings = settings or Settings()
    store = InMemoryAddressBook(snapshot, default_region=settings.default_region)
    return ContactBookModel(store, history_limit=settings.history_limit)
