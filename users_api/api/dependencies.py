"""API Dependencies — builds the UserService and its collaborators per request.

Invariants:
    - Routes receive a UserService, never a repository or session manager directly
    - The logger adapter is named after UserService so its events group by component

Design Decisions:
    - Dependency functions over module-level singletons: tests swap the service with
      app.dependency_overrides[get_user_service]
"""

from fastapi import Depends

from users_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from users_api.infrastructure.observability import StdLoggerAdapter
from users_api.infrastructure.user_repository import SqlUserRepository
from users_api.services.user_service import UserService


def get_user_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> UserService:
    return UserService(
        SqlUserRepository(db_manager), StdLoggerAdapter(UserService),
    )
