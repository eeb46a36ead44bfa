"""
Database module - local key-value persistence.
"""
from parttime_jobs.db.local_store import LocalStore, get_local_store

__all__ = [
    "LocalStore",
    "get_local_store"
]
