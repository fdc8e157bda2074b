"""Runtime settings read from the environment (and an optional .env file)."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

STORE_MEMORY = "memory"
STORE_NEO4J = "neo4j"

DEFAULT_PORT = 3001

# Repo root: from src/phonebook/config.py go up three levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


class ConfigError(RuntimeError):
    """Missing or invalid configuration."""


@dataclass(frozen=True)
class Settings:
    store: str = STORE_MEMORY
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    neo4j_uri: str | None = None
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"


def load_env_file() -> None:
    """Load .env from repo root or current dir, whichever exists first."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _get(environ: Mapping[str, str], key: str) -> str | None:
    return (environ.get(key) or "").strip() or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (defaults to os.environ).

    Memory mode falls back to DEFAULT_PORT; neo4j mode requires PORT and NEO4J_URI.
    """
    if environ is None:
        environ = os.environ
    store = (_get(environ, "PHONEBOOK_STORE") or STORE_MEMORY).lower()
    if store not in (STORE_MEMORY, STORE_NEO4J):
        raise ConfigError(f"Unknown PHONEBOOK_STORE {store!r} (expected memory or neo4j)")

    raw_port = _get(environ, "PORT")
    if raw_port is None:
        if store == STORE_NEO4J:
            raise ConfigError("PORT must be set when PHONEBOOK_STORE=neo4j")
        port = DEFAULT_PORT
    else:
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None

    neo4j_uri = _get(environ, "NEO4J_URI")
    if store == STORE_NEO4J and neo4j_uri is None:
        raise ConfigError("NEO4J_URI must be set when PHONEBOOK_STORE=neo4j")

    return Settings(
        store=store,
        host=_get(environ, "HOST") or "0.0.0.0",
        port=port,
        neo4j_uri=neo4j_uri,
        neo4j_user=_get(environ, "NEO4J_USER") or "neo4j",
        neo4j_password=_get(environ, "NEO4J_PASSWORD") or "password",
    )
