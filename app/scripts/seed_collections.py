"""
Seed Collections Script
Loads relief goods and recent works records from a JSON file into MongoDB
and makes sure the users index exists. The API has no write path for
recent works, so this is how that collection gets populated.

Usage: python -m app.scripts.seed_collections seed.json

The file holds {"reliefgoods": [...], "ourRecentlyWorks": [...]}; either key may be omitted.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from app.config.settings import settings
from app.database.mongo_client import MongoClient, ensure_indexes, ping

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_seed_file(path: Path) -> Dict[str, List[Dict[str, Any]]]:
    """Read and shape-check the seed file"""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Seed file must contain a JSON object keyed by collection name")
    for name, records in data.items():
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ValueError(f"Collection {name!r} must be a list of JSON objects")
    return data


async def seed_collection(database, collection_name: str, records: List[Dict[str, Any]]) -> int:
    """Insert records into one collection, returning how many were written"""
    if not records:
        logger.info(f"No records for {collection_name}, skipping")
        return 0
    result = await database[collection_name].insert_many([dict(r) for r in records])
    logger.info(f"Seeded {len(result.inserted_ids)} records into {collection_name}")
    return len(result.inserted_ids)


async def seed(database, data: Dict[str, List[Dict[str, Any]]]) -> int:
    await ensure_indexes(database)
    total = 0
    for collection_name in (settings.relief_goods_collection, settings.recent_works_collection):
        total += await seed_collection(database, collection_name, data.get(collection_name, []))
    return total


async def run(path: Path) -> int:
    data = load_seed_file(path)
    database = MongoClient.get_database()
    try:
        await ping(database)
        return await seed(database, data)
    finally:
        await MongoClient.close_client()


def main():
    """Main function to seed the collections"""
    if len(sys.argv) != 2:
        logger.error("Usage: python -m app.scripts.seed_collections <seed.json>")
        sys.exit(2)
    try:
        logger.info("Starting collection seeding...")
        total = asyncio.run(run(Path(sys.argv[1])))
        logger.info(f"Seeding completed successfully! Total: {total} records")
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
