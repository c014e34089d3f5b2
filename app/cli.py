"""
CLI entry point for the gateway.

Usage:
    # Serve the API
    python -m app.cli serve --port 8000

    # Print the tier catalog (permissions and limits per tier)
    python -m app.cli tiers
"""

import argparse
import logging
from typing import Optional, Sequence

from app.core.config import settings
from app.domain.identity.tier_catalog import TierCatalog
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def cmd_tiers(args: argparse.Namespace) -> None:
    """Print every tier with its limits and permissions."""
    for definition in TierCatalog().all_tiers():
        limits = definition.limits
        print(
            f"{definition.tier.value:<9} {definition.display_name:<14} "
            f"{limits.requests_per_minute:>5} rpm  {limits.concurrent_connections:>3} conn"
        )
        for permission in sorted(p.value for p in definition.permissions):
            print(f"    {permission}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Blade Dance API gateway CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the API")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    tiers_parser = subparsers.add_parser("tiers", help="Print the tier catalog")
    tiers_parser.set_defaults(func=cmd_tiers)

    args = parser.parse_args(argv)
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
