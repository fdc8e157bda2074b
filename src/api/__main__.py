"""
Phonebook API server.
Run: python -m api (from repo root, with .env or env vars set).
"""
import logging

import uvicorn

from phonebook.config import load_env_file, load_settings

load_env_file()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    logger.info("Server running on port %s", settings.port)
    uvicorn.run("api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
