"""Boundary Protocols — contracts between the service core and the shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Persistence and logging are accessed only through these Protocol types
    - Absence is signalled by return value (None / False), never by raising
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async repository: implementations do IO; the service awaits exactly one call per operation
    - LoggerAdapter takes positional {0}-style templates so callers can assert on
      the template and its arguments separately from the rendered message
"""

from typing import Protocol

from users_api.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def get_all(self) -> list[User]: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def create(self, user: User) -> bool: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...


class LoggerAdapter(Protocol):
    """Contract for leveled, templated logging scoped to one component."""
    def log_information(self, template: str, *args: object) -> None: ...
    def log_error(
        self, error: BaseException, template: str, *args: object,
    ) -> None: ...
