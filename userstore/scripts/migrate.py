"""Create the users table and insert the seed users."""

import asyncio
import logging
import sys
from collections.abc import Sequence

from userstore.app import Application
from userstore.config import Settings, load_settings
from userstore.models import User
from userstore.persistence.errors import StoreError
from userstore.scripts.common import apply_args_to_settings, build_parser

logger = logging.getLogger(__name__)

SEED_USERS: list[tuple[str, int]] = [
    ("Adele Goldberg", 62),
    ("Alan Kay", 65),
]


async def async_main(settings: Settings, configure_logging: bool = True) -> int:
    """Run the migration and seed the table."""
    try:
        async with Application(settings, configure_logging) as app:
            repo = app.repository
            logger.info("Running migration for User")
            await repo.create_table()
            logger.info("Migration Done.")

            for name, age in SEED_USERS:
                await User(name, age).insert(repo)
            logger.info("Seeded %d users, %d in table", len(SEED_USERS), await repo.count())
        return 0
    except StoreError as e:
        logger.error("Migration failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser("Create the users table and insert seed users")
    args = parser.parse_args(argv)
    settings = apply_args_to_settings(args, load_settings())
    return asyncio.run(async_main(settings))


if __name__ == "__main__":
    sys.exit(main())
