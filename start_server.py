#!/usr/bin/env python3
"""
Run the Task Tracker API under uvicorn.

Configuration comes from the same environment/.env as the app itself;
HOST, PORT and RELOAD only concern the server process.
"""

import logging
import os

import uvicorn

from task_tracker.config.settings import Settings

logger = logging.getLogger("start_server")


def server_options(settings: Settings) -> dict:
    return {
        "host": os.getenv("HOST", "0.0.0.0"),
        "port": int(os.getenv("PORT", "8000")),
        "reload": os.getenv("RELOAD", "false").lower() == "true",
        "log_level": settings.log_level.lower(),
    }


def main():
    settings = Settings.from_env()
    options = server_options(settings)

    logging.basicConfig(level=settings.log_level)
    logger.info("Starting Task Tracker API on %s:%s (reload=%s)", options["host"], options["port"], options["reload"])

    uvicorn.run("main:app", **options)


if __name__ == "__main__":
    main()
