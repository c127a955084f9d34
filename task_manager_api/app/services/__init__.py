"""
Service layer abstraction.

Services hold the logic between the API handlers and storage.  They
receive their store explicitly so the same code runs against MongoDB,
SQLite or the in‑memory store.
"""
