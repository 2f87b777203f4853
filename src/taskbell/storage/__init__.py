"""
Storage subsystem.

Components:
- blob_store.py: key-value blob stores (SQLite, in-memory)
- snapshot.py: whole-collection load/save with explicit result objects
"""
