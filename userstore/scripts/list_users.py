"""Print every stored user."""

import asyncio
import logging
import sys
from collections.abc import Sequence

from userstore.app import Application
from userstore.config import Settings, load_settings
from userstore.persistence.errors import StoreError
from userstore.scripts.common import apply_args_to_settings, build_parser

logger = logging.getLogger(__name__)


async def async_main(settings: Settings, configure_logging: bool = True) -> int:
    try:
        async with Application(settings, configure_logging) as app:
            users = await app.repository.all()
    except StoreError as e:
        logger.error("Listing users failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for user in users:
        print(user)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser("Print all users")
    args = parser.parse_args(argv)
    settings = apply_args_to_settings(args, load_settings())
    return asyncio.run(async_main(settings))


if __name__ == "__main__":
    sys.exit(main())
