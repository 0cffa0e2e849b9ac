"""
Seed script: creates the tables and fills `mosques` with generated data.

Uses the same generator as the mock data source, so a seeded database
answers nearby queries around each city the way the mock does.
Uses asyncpg with COPY protocol for bulk insert.

Usage:
    cd backend
    python -m app.seed
"""

import asyncio
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable

from app.config import get_settings
from app.database import get_pool, close_pool
from app.models.mosque import Base, Mosque
from app.models.submission import MosqueSubmission  # noqa: F401  (registers the table)
from app.services.mock_mosques import MOSQUES, create_mock_mosques

# ──────────────────────────────────────────────
# Cities to scatter mosques around
# ──────────────────────────────────────────────

CITIES = [
    {"name": "Jakarta", "lat": -6.2000, "lng": 106.8167},
    {"name": "Bandung", "lat": -6.9175, "lng": 107.6191},
    {"name": "Surabaya", "lat": -7.2575, "lng": 112.7521},
]

MOSQUE_COLUMNS = [
    c.name for c in Mosque.__table__.columns if c.name not in ("id", "created_at")
]


def schema_ddl() -> list[str]:
    """CREATE TABLE / CREATE INDEX statements for every model, PostgreSQL dialect."""
    dialect = postgresql.dialect()
    statements = []
    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table, if_not_exists=True).compile(dialect=dialect)))
        for index in sorted(table.indexes, key=lambda i: i.name):
            statements.append(str(CreateIndex(index, if_not_exists=True).compile(dialect=dialect)))
    return statements


def build_records(seed: int) -> list[tuple]:
    records = []
    for city in CITIES:
        for mosque in create_mock_mosques(city["lat"], city["lng"], seed=seed, count=len(MOSQUES)):
            records.append(tuple(mosque.get(col) for col in MOSQUE_COLUMNS))
    return records


# ──────────────────────────────────────────────
# Main seed routine
# ──────────────────────────────────────────────

async def seed():
    settings = get_settings()
    pool = await get_pool()

    async with pool.acquire() as conn:
        print("Creating tables...")
        for statement in schema_ddl():
            await conn.execute(statement)

        print("Clearing existing mosques...")
        await conn.execute("DELETE FROM mosques")

        records = build_records(settings.MOCK_SEED)
        await conn.copy_records_to_table(
            "mosques",
            records=records,
            columns=MOSQUE_COLUMNS,
        )
        for city in CITIES:
            print(f"  [OK] {len(MOSQUES)} mosques around {city['name']}")

        print(f"\n{'='*50}")
        print("Seed complete!")
        print(f"  Mosques: {len(records)}")
        print(f"{'='*50}")

    await close_pool()


async def main():
    print("=" * 50)
    print("SEED SCRIPT - Mosque Finder")
    print("=" * 50)
    await seed()


if __name__ == "__main__":
    asyncio.run(main())
