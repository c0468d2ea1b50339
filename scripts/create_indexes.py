#!/usr/bin/env python3
"""
Create MongoDB indexes for users, profiles and posts
"""

import asyncio
import sys
from pathlib import Path

from motor.motor_asyncio import AsyncIOMotorClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import settings  # noqa: E402
from app.db.session import create_indexes  # noqa: E402


async def main() -> int:
    print("🔧 Creating MongoDB Indexes")
    print("=" * 60)

    print("\n📡 Connecting to MongoDB...")
    mongo_client = AsyncIOMotorClient(settings.MONGODB_URI)
    db = mongo_client[settings.MONGODB_DATABASE]

    try:
        await mongo_client.admin.command("ping")
        print("✅ MongoDB connected")

        await create_indexes(db)

        for name in await db.list_collection_names():
            print(f"\n📋 {name}:")
            indexes = await db[name].list_indexes().to_list(length=None)
            for idx in indexes:
                print(f"   - {idx['name']}: {dict(idx.get('key', {}))}")
    except Exception as e:
        print(f"❌ Failed: {e}")
        return 1
    finally:
        mongo_client.close()

    print("\n✅ Done")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
