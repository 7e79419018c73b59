"""Core Layer — domain types, boundary protocols, and the error hierarchy.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Nothing here performs IO

Design Decisions:
    - Protocols live in core so the service depends only inward
"""
