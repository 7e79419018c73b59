"""User Service — orchestrates repository calls with timing, logging, and error propagation.

Invariants:
    - Every operation: one "start" info log, then EITHER one "completed" info log
      carrying the elapsed milliseconds OR one error log carrying the exception
    - Elapsed time measured with a monotonic clock strictly around the repository await
    - Repository exceptions re-raised unchanged (same object) after being logged once
    - None / False from the repository are normal outcomes — returned as-is, never logged as errors
    - No validation, no id generation, no retries; the service holds no state of its own

Design Decisions:
    - Explicit perf_counter sampling per method over a timing decorator: which call is
      timed stays visible at the call site
    - Collaborators injected as Protocols (core/repository_protocols.py)
"""

import time

from users_api.core.domain_types import User, UserId
from users_api.core.repository_protocols import LoggerAdapter, UserRepository


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class UserService:
    """Thin CRUD layer between the API routes and the user repository."""

    def __init__(self, repository: UserRepository, logger: LoggerAdapter):
        self._repository = repository
        self._logger = logger

    async def get_all(self) -> list[User]:
        self._logger.log_information("Retrieving all users")
        try:
            started = time.perf_counter()
            users = await self._repository.get_all()
            duration = _elapsed_ms(started)
        except Exception as e:
            self._logger.log_error(
                e, "Something went wrong while retrieving all users",
            )
            raise
        self._logger.log_information(
            "All users retrieved in {0}ms", duration,
        )
        return users

    async def get_by_id(self, user_id: UserId) -> User | None:
        self._logger.log_information("Retrieving user with id: {0}", user_id)
        try:
            started = time.perf_counter()
            user = await self._repository.get_by_id(user_id)
            duration = _elapsed_ms(started)
        except Exception as e:
            self._logger.log_error(
                e, "Something went wrong while retrieving user with id {0}",
                user_id,
            )
            raise
        self._logger.log_information(
            "User with id {0} retrieved in {1}ms", user_id, duration,
        )
        return user

    async def create(self, user: User) -> bool:
        self._logger.log_information(
            "Creating user with id {0} and name: {1}", user.id, user.full_name,
        )
        try:
            started = time.perf_counter()
            created = await self._repository.create(user)
            duration = _elapsed_ms(started)
        except Exception as e:
            self._logger.log_error(
                e, "Something went wrong while creating a user",
            )
            raise
        self._logger.log_information(
            "User with id {0} created in {1}ms", user.id, duration,
        )
        return created

    async def delete_by_id(self, user_id: UserId) -> bool:
        self._logger.log_information("Deleting user with id: {0}", user_id)
        try:
            started = time.perf_counter()
            deleted = await self._repository.delete_by_id(user_id)
            duration = _elapsed_ms(started)
        except Exception as e:
            self._logger.log_error(
                e, "Something went wrong while deleting user with id {0}",
                user_id,
            )
            raise
        self._logger.log_information(
            "User with id {0} deleted in {1}ms", user_id, duration,
        )
        return deleted
