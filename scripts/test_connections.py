#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the backend and the placement database are reachable.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from path2placement.db.postgres import test_postgres_connection
from path2placement.services.backend_client import get_backend_client
from path2placement.services.placement_service import get_placement_service
from path2placement.core.config import get_settings
from path2placement.core.errors import GatewayError


def main():
    settings = get_settings()
    print("=" * 50)
    print("PATH2PLACEMENT - CONNECTION TEST")
    print("=" * 50)

    # Test backend API
    print("\n[1] Testing backend API...")
    print(f"    URL: {settings.backend_base_url}")
    if get_backend_client().test_connection():
        print("    ✅ Backend: REACHABLE")
    else:
        print("    ❌ Backend: UNREACHABLE")

    # Test placement database
    print("\n[2] Testing placement database...")
    print(f"    Host: {settings.supabase_db_host}:{settings.supabase_db_port}/{settings.supabase_db_name}")
    if test_postgres_connection():
        print("    ✅ Database: CONNECTED")
        try:
            rows = get_placement_service().fetch_all()
            print(f"    ✅ {settings.placements_table}: {len(rows)} rows")
        except GatewayError as e:
            print(f"    ❌ {settings.placements_table}: {e.message}")
    else:
        print("    ❌ Database: FAILED")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
