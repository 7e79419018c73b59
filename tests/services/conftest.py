"""Service test fixtures — UserService wired to mock collaborators.

Invariants:
    - repository is an AsyncMock: every method is awaitable, return values set per test
    - logger is a MagicMock: call_args_list is the observable log stream

Design Decisions:
    - Mocks over the SQL repository: service tests assert orchestration (call counts,
      templates, re-raise identity), not persistence
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from users_api.services.user_service import UserService


@pytest.fixture
def repository():
    return AsyncMock()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def sut(repository, logger):
    return UserService(repository, logger)
