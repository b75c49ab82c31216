"""Seed script for initial test data."""

import asyncio

from sqlalchemy import delete, insert

from skill_service.database import Database, init_tables
from skill_service.models.tables import SkillRecord

SKILLS = [
    {
        "key": "skill-1",
        "name": "Test Skill 1",
        "description": "Description for Test Skill 1",
        "logo": "http://example.com/logo1.png",
        "tags": ["tag1", "tag2"],
    },
    {
        "key": "skill-2",
        "name": "Test Skill 2",
        "description": "Description for Test Skill 2",
        "logo": "http://example.com/logo2.png",
        "tags": ["tag3", "tag4"],
    },
]


async def seed_data():
    """Seed PostgreSQL with test skills."""
    await Database.connect()
    await init_tables()

    async with Database.get_session() as session:
        keys = [s["key"] for s in SKILLS]
        await session.execute(delete(SkillRecord).where(SkillRecord.key.in_(keys)))
        print(f"🧹 Cleared {len(keys)} seed keys")

        await session.execute(insert(SkillRecord), SKILLS)
        print(f"🛠  Created {len(SKILLS)} skills")

    await Database.disconnect()
    print("✅ Seed complete")


if __name__ == "__main__":
    asyncio.run(seed_data())
