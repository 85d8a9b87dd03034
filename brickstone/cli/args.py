"""Command line argument parsing."""

import argparse

from brickstone import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="brickstone",
        description="Brickstone Realty Group - marketing site and contact service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to the YAML config file (default: config.yaml)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (overrides server.host from config)",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help="Port to listen on (overrides server.port from config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Skip the startup screen",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - config: Path to the config file
        - host: Bind address override (optional)
        - port: Port override (optional)
        - verbose: Whether to show debug logs
        - no_banner: Whether to skip the startup screen
    """
    return build_parser().parse_args(argv)
