"""ASGI application factory for uvicorn.

This module provides a factory function that uvicorn can use to create
the FastAPI application with proper dependency injection.

Usage:
    uvicorn brickstone.asgi:create_app_from_env --factory
"""

import os

from brickstone.composition import create_container


def create_app_from_env():
    """Create FastAPI app from environment variables.

    This is called by uvicorn when using the --factory flag.
    Environment variables:
        BRICKSTONE_CONFIG_PATH: Path to config file (default: config.yaml)
    """
    from brickstone.app import create_app

    config_path = os.environ.get("BRICKSTONE_CONFIG_PATH", "config.yaml")
    container = create_container(config_path=config_path)

    return create_app(container)
