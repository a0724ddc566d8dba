"""
Database module - storage backends and seed data.
"""
from jobportal.db.storage import Storage, create_storage, get_storage

__all__ = [
    "Storage",
    "create_storage",
    "get_storage",
]
