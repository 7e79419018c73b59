"""Infrastructure Layer — database access, repositories, and logging.

Invariants:
    - Infrastructure implements the Protocols declared in core/repository_protocols.py
    - All SQLAlchemy failures mapped to DatabaseError at the session boundary

Design Decisions:
    - Concrete implementations kept out of core so tests can substitute fakes
"""
