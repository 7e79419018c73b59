"""Domain Types — the User entity and its identity type.

Invariants:
    - UserId wraps a UUID — never use a bare UUID in domain logic
    - User.id is assigned at construction (generated when absent) and never mutated
    - User carries no persistence or transport concerns

Design Decisions:
    - NewType for identity: zero runtime cost, full type-checker support
    - Frozen dataclass for User: immutability enforced at runtime, value equality for free
"""

from dataclasses import dataclass, field
from typing import NewType
from uuid import UUID, uuid4


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


def new_user_id() -> UserId:
    return UserId(uuid4())


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    """A user of the system. Plain value record, no relationships."""
    full_name: str = ""
    id: UserId = field(default_factory=new_user_id)
