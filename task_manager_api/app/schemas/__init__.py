"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the storage layer so the JSON shape of
a task does not depend on which store holds it.
"""
