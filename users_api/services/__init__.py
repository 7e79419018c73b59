"""Services Layer — orchestration between API routes and repositories.

Invariants:
    - Services hold no state beyond injected collaborators
    - Services never translate repository exceptions

Design Decisions:
    - Collaborators passed to the constructor (see api/dependencies.py for wiring)
"""
