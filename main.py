#!/usr/bin/env python

"""
To-Do List Application - Main Entry Point

A small web to-do list: list, add, mark done and delete tasks stored in
SQLite, MySQL or SQL Server.

Usage:
    python main.py

Configuration comes from environment variables or a .env file
(see .env.example). APP_ENV=development creates the Tasks table on start.
"""

import logging
import sys

import uvicorn
import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsError

from todoapp.infra.config import get_settings
from todoapp.web import create_app

logger = logging.getLogger("todoapp")


def main():
    """Main entry point"""
    try:
        settings = get_settings()
    except (ValidationError, SettingsError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    # A failed database check aborts startup inside uvicorn before the port is bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
