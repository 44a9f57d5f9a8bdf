"""
Initialize database schema
Creates all tables defined in models
"""
import sys
import os

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import logger
from core.database import init_db


def main():
    """Create all tables in the database"""
    try:
        init_db()
    except Exception as e:
        logger.error(f"[db] Error creating tables: {e}")
        sys.exit(1)
    print("Created tables:")
    print("  - waitlist_entries")


if __name__ == "__main__":
    main()
