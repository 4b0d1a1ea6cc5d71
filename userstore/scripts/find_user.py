"""Print a single user looked up by id."""

import asyncio
import logging
import sys
from collections.abc import Sequence

from userstore.app import Application
from userstore.config import Settings, load_settings
from userstore.persistence.errors import StoreError
from userstore.scripts.common import apply_args_to_settings, build_parser

logger = logging.getLogger(__name__)


async def async_main(
    settings: Settings, user_id: int = 1, configure_logging: bool = True
) -> int:
    try:
        async with Application(settings, configure_logging) as app:
            user = await app.repository.find(user_id)
    except StoreError as e:
        logger.error("Lookup of user %s failed: %s", user_id, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(user)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser("Print the user with the given id")
    parser.add_argument(
        "--id",
        type=int,
        default=1,
        dest="user_id",
        help="User id to look up (default: 1)",
    )
    args = parser.parse_args(argv)
    settings = apply_args_to_settings(args, load_settings())
    return asyncio.run(async_main(settings, args.user_id))


if __name__ == "__main__":
    sys.exit(main())
