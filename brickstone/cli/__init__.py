"""Command line entry point."""

import logging
import sys

import uvicorn
import yaml

from brickstone.app import create_app
from brickstone.composition import build_container
from brickstone.config import load_config
from brickstone.logging_setup import setup_logging

from .args import parse_args
from .display import display_startup_screen, local_url

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Load config, show the startup screen and serve until interrupted."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Invalid configuration in {args.config}:\n{e}", file=sys.stderr)
        return 2

    host = args.host or config.server.host
    port = args.port or config.server.port

    container = build_container(config)
    app = create_app(container)

    if not args.no_banner:
        display_startup_screen(
            local_url(host, port),
            public_url=config.site.public_url,
            mail_transport=config.mail.transport,
            allowed_origins=config.site.allowed_origins,
        )

    logger.info("Serving on %s:%d config=%s", host, port, args.config)
    uvicorn.run(app, host=host, port=port, log_level="debug" if args.verbose else "info")
    return 0
