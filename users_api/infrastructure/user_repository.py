"""SQL User Repository — UserRepository implementation over the async session manager.

Invariants:
    - One session per operation, opened through DatabaseSessionManager.session()
    - ORM records are converted to domain Users before leaving this module
    - Absence is a return value: get_by_id -> None, create/delete_by_id -> False
    - SQLAlchemy failures surface as DatabaseError (mapped by the session manager)

Design Decisions:
    - create checks for an existing id before inserting: a duplicate is a rejected
      create (False), not an integrity error
    - A concurrent create that slips past the check loses on the primary key; its
      IntegrityError is rolled back and reported as False as well
    - delete_by_id uses a bulk DELETE and rowcount: one round trip, no load-then-delete
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from users_api.core.domain_types import User, UserId
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.models.user import UserRecord


def _to_domain(record: UserRecord) -> User:
    return User(id=UserId(record.id), full_name=record.full_name)


class SqlUserRepository:
    """Persists users in the `users` table."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get_all(self) -> list[User]:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRecord).order_by(UserRecord.created_at),
            )
            return [_to_domain(r) for r in result.scalars().all()]

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._db.session() as db:
            record = await db.get(UserRecord, user_id)
            return _to_domain(record) if record else None

    async def create(self, user: User) -> bool:
        async with self._db.session() as db:
            if await db.get(UserRecord, user.id) is not None:
                return False
            db.add(UserRecord(id=user.id, full_name=user.full_name))
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                return False
            return True

    async def delete_by_id(self, user_id: UserId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(UserRecord).where(UserRecord.id == user_id),
            )
            await db.commit()
            return result.rowcount > 0
