"""
Data Seeder for the To-Do List.
Populates the configured database with a few tasks for demos.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from todoapp.infra.config import get_settings
from todoapp.infra.db import open_database, StartupError
from todoapp.infra.repository import TaskRepository

logger = logging.getLogger("seed_data")

SAMPLE_TASKS = [
    "Buy milk",
    "Water the plants",
    "Book dentist appointment",
    "Renew library card",
]


async def seed() -> int:
    settings = get_settings()
    db = await open_database(settings)
    try:
        # Seeding always needs the table, whatever APP_ENV says
        await db.create_tables()
        repo = TaskRepository(db)

        listing = await repo.list_tasks()
        if not listing.ok:
            logger.error("Could not read existing tasks: %s", listing.error)
            return 1
        existing = {t.text for t in listing.tasks}

        for text in SAMPLE_TASKS:
            if text in existing:
                logger.info("Skipping existing task: %s", text)
                continue
            task = await repo.add_task(text)
            logger.info("Created task %s: %s", task.id, task.text)

        # Leave one task finished so both states show up on the page
        first = await repo.list_tasks()
        if first.tasks:
            await repo.mark_done(first.tasks[0].id)
        return 0
    finally:
        await db.dispose()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        return asyncio.run(seed())
    except StartupError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
