"""Run the Matchlog server.

Usage:
    python -m matchlog

Configuration comes from the environment (PORT, HOST, DATA_DIR,
DATABASE_URL, PUBLIC_DIR, LOG_LEVEL).
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from matchlog.api.app import create_app
from matchlog.config import load_settings
from matchlog.errors import StorageError

logger = logging.getLogger("matchlog")


def main() -> int:
    """Load settings, prepare storage and serve until interrupted.

    Returns:
        Process exit code.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except StorageError:
        logger.exception("Failed to start app")
        return 1

    logger.info(
        "Match tracker running on http://localhost:%d (%s storage)",
        settings.port,
        app.state.store.describe(),
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
