"""Seed script — inserts missing clients keyed by email, idempotent."""

from sqlalchemy import func, select

from app.db.base import Base
from app.db.session import create_session_factory
from app.models.client import Client
from app.seed import SEED_CLIENTS, _run, seed_clients


async def _count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Client))).scalar_one()


async def test_seed_inserts_all_clients(test_db):
    count = await seed_clients(test_db)
    assert count == len(SEED_CLIENTS)
    assert await _count(test_db) == len(SEED_CLIENTS)


async def test_seed_twice_inserts_nothing_new(test_db):
    await seed_clients(test_db)
    await seed_clients(test_db)
    assert await _count(test_db) == len(SEED_CLIENTS)


async def test_seed_keeps_existing_rows_untouched(test_db):
    test_db.add(Client(name="Countess of Lovelace", email="ada.lovelace@example.com"))
    await test_db.commit()

    await seed_clients(test_db)

    row = (await test_db.execute(
        select(Client).where(Client.email == "ada.lovelace@example.com"),
    )).scalar_one()
    assert row.name == "Countess of Lovelace"
    assert await _count(test_db) == len(SEED_CLIENTS)


async def test_session_factory_is_bound_to_returned_engine():
    engine, factory = create_session_factory("sqlite+aiosqlite:///:memory:")
    try:
        async with factory() as db:
            assert db.bind is engine
    finally:
        await engine.dispose()


async def test_run_seeds_file_database_idempotently(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"
    engine, factory = create_session_factory(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    assert await _run(url) == len(SEED_CLIENTS)
    assert await _run(url) == len(SEED_CLIENTS)

    async with factory() as db:
        assert await _count(db) == len(SEED_CLIENTS)
    await engine.dispose()
