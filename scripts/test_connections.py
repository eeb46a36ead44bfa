#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify local storage, the backend stub and the AI API are usable.
Usage: python scripts/test_connections.py
"""
import asyncio

from parttime_jobs.core.config import get_settings
from parttime_jobs.db.local_store import get_local_store
from parttime_jobs.services.api_client import get_api_client
from parttime_jobs.services.text_generation import get_text_client


def main():
    settings = get_settings()
    print("=" * 50)
    print("PART-TIME JOBS - CONNECTION TEST")
    print("=" * 50)

    # Local storage
    print("\n[1] Testing local storage...")
    print(f"    Directory: {settings.storage_dir}")
    if get_local_store().test_writable():
        print("    ✅ Storage: WRITABLE")
    else:
        print("    ❌ Storage: FAILED")

    # Backend stub
    print("\n[2] Testing backend API...")
    print(f"    Base URL: {settings.resolved_api_base_url}")
    if asyncio.run(get_api_client().test_connection()):
        print("    ✅ Backend: REACHABLE")
    else:
        print("    ❌ Backend: FAILED")

    # Text generation (only if API key is set)
    print("\n[3] Testing text generation API...")
    client = get_text_client()
    if client.configured:
        print(f"    Base URL: {settings.text_generation_base_url}")
        if client.test_connection():
            print("    ✅ Text generation: CONNECTED")
        else:
            print("    ❌ Text generation: FAILED")
    else:
        print("    ⚠️  Text generation: API key not configured (descriptions fall back to a notice)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
