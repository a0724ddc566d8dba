#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the storage backend and AI API are working.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from jobportal.core.config import get_settings
from jobportal.db.storage import get_storage
from jobportal.services.ai_client import get_assistant_client
from jobportal.services.document_service import JobPortalDB


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOBPORTAL - CONNECTION CHECK")
    print("=" * 50)

    # Storage
    print(f"\n[1] Checking {settings.storage_backend} storage...")
    if settings.storage_backend == "mongo":
        print(f"    URI: {settings.mongodb_uri}")
        print(f"    Database: {settings.mongodb_db}.{settings.mongodb_collection}")
    elif settings.storage_backend == "file":
        print(f"    Data dir: {settings.data_dir}")
    storage = get_storage()
    if storage.ping():
        print("    ✅ Storage: CONNECTED")
        db = JobPortalDB(storage, settings)
        print(f"    Jobs: {db.jobs.count()}, users: {db.users.count()}, "
              f"companies: {db.companies.count()}")
    else:
        print("    ❌ Storage: FAILED")

    # AI (only if API key is set)
    print("\n[2] Checking AI API...")
    if settings.ai_configured:
        print(f"    Base URL: {settings.ai_base_url}")
        print(f"    Model: {settings.ai_model}")
        if get_assistant_client().test_connection():
            print("    ✅ AI: CONNECTED")
        else:
            print("    ❌ AI: FAILED")
    else:
        print("    ⚠️  AI: API key not configured (assistant replies with fallbacks)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
