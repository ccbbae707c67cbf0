#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables if needed and loads the demo catalog.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio

import structlog

from app.catalog.seed import seed_catalog
from app.infrastructure.config import settings
from app.infrastructure.database import async_session_factory, create_tables, engine
from app.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the demo product catalog",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing catalog rows before seeding",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)

    await create_tables()
    logger.info("Tables ready")

    async with async_session_factory() as session:
        result = await seed_catalog(session, clear_existing=not args.no_clear)
        await session.commit()

    logger.info("Seeding complete", **result)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
