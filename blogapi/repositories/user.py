"""User repository for database operations."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col

from blogapi.errors.database import DatabaseError, DuplicateEntryError
from blogapi.models import UserDB
from blogapi.repositories.base import like_pattern


class UserRepository:
    """
    Repository for User database operations.

    Users are only ever created and read; this API never updates or
    deletes them.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, user: UserDB) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: User model with the password already hashed

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the email already exists
            DatabaseError: For other database errors
        """
        try:
            self.session.add(user)
            await self.session.flush()
            await self.session.refresh(user)
            return user
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "email" in error_msg.lower():
                raise DuplicateEntryError(detail="Email already registered") from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """
        Get user by ID.

        Args:
            user_id: User UUID

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(select(UserDB).where(col(UserDB.id) == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(select(UserDB).where(col(UserDB.email) == email))
        return result.scalar_one_or_none()

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        """Get users keyed by id, in one round trip."""
        ids = set(user_ids)
        if not ids:
            return {}
        result = await self.session.execute(select(UserDB).where(col(UserDB.id).in_(ids)))
        return {user.id: user for user in result.scalars().all()}

    async def find_ids_matching(self, term: str) -> list[UUID]:
        """
        Find users whose first name, last name or email contains `term`.

        Matching is case-insensitive and literal.

        Args:
            term: Search term

        Returns:
            list[UUID]: Ids of matching users
        """
        pattern = like_pattern(term)
        statement = select(col(UserDB.id)).where(
            or_(
                col(UserDB.first_name).ilike(pattern, escape="\\"),
                col(UserDB.last_name).ilike(pattern, escape="\\"),
                col(UserDB.email).ilike(pattern, escape="\\"),
            ),
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
