"""Seed Script — loads a fixed set of Client records.

Invariants:
    - Keyed by email: existing rows are kept untouched, missing rows inserted
    - Idempotent: running twice inserts nothing the second time
    - Exit status 1 on any failure
"""

import asyncio
import logging
import sys

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.session import create_session_factory
from app.infrastructure.observability import setup_logging
from app.models.client import Client

logger = logging.getLogger(__name__)

SEED_CLIENTS: list[dict[str, str]] = [
    {"name": "Ada Lovelace", "email": "ada.lovelace@example.com"},
    {"name": "Alan Turing", "email": "alan.turing@example.com"},
    {"name": "Grace Hopper", "email": "grace.hopper@example.com"},
    {"name": "Margaret Hamilton", "email": "margaret.hamilton@example.com"},
    {"name": "Donald Knuth", "email": "donald.knuth@example.com"},
    {"name": "Barbara Liskov", "email": "barbara.liskov@example.com"},
    {"name": "Edsger Dijkstra", "email": "edsger.dijkstra@example.com"},
    {"name": "Linus Torvalds", "email": "linus.torvalds@example.com"},
    {"name": "Radia Perlman", "email": "radia.perlman@example.com"},
    {"name": "Tim Berners-Lee", "email": "tim.bernerslee@example.com"},
]


async def seed_clients(db: AsyncSession) -> int:
    """Insert seed clients whose email is not present yet. Returns the seed count."""
    emails = [c["email"] for c in SEED_CLIENTS]
    result = await db.execute(select(Client.email).where(Client.email.in_(emails)))
    existing = set(result.scalars().all())
    for data in SEED_CLIENTS:
        if data["email"] not in existing:
            db.add(Client(**data))
    await db.commit()
    logger.info(
        f"Seeded clients: {len(SEED_CLIENTS) - len(existing)} inserted, "
        f"{len(existing)} already present",
    )
    return len(SEED_CLIENTS)


async def _run(database_url: str) -> int:
    engine, session_factory = create_session_factory(database_url)
    try:
        async with session_factory() as db:
            return await seed_clients(db)
    finally:
        await engine.dispose()


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        count = asyncio.run(_run(settings.database_url))
    except Exception:
        logger.error("Seeding clients failed", exc_info=True)
        sys.exit(1)
    logger.info(f"Client seed complete ({count} records)")


if __name__ == "__main__":
    main()
