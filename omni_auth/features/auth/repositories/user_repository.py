"""User record store: protocol and SQLAlchemy implementation."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Protocol, assert_never
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from omni_auth.features.auth.errors import UserAlreadyExistsError
from omni_auth.features.auth.identifiers import (
    EmailIdentifier,
    PhoneIdentifier,
    SignInIdentifier,
    UsernameIdentifier,
    WhatsappIdentifier,
)
from omni_auth.features.auth.models import User


@dataclass(frozen=True, slots=True)
class NewUser:
    email: str
    username: str
    hashed_password: str
    country_code: str | None = None
    phone_number: str | None = None
    whatsapp_country_code: str | None = None
    whatsapp_phone_number: str | None = None


class UserRepository(Protocol):
    """Protocol for user record lookups and creation."""

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by email, case-insensitively."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find a user by username, case-insensitively."""
        ...

    async def find_by_phone(self, country_code: str, phone_number: str) -> User | None:
        """Find a user whose plain phone pair matches exactly."""
        ...

    async def find_by_whatsapp(
        self, country_code: str, phone_number: str
    ) -> User | None:
        """Find a user whose WhatsApp pair matches exactly."""
        ...

    async def find_by_identifier(self, identifier: SignInIdentifier) -> User | None:
        """Find a user by whichever identifier kind was resolved."""
        ...

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Fetch a user by primary key."""
        ...

    async def create(self, new_user: NewUser) -> User:
        """Persist a new user.

        Raises:
            UserAlreadyExistsError: If a unique index rejects the insert.
        """
        ...


class SqlAlchemyUserRepository:
    """UserRepository backed by an async SQLAlchemy session factory."""

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the repository.

        Args:
            get_db_session: Function returning an async session context manager
        """
        self.get_db_session = get_db_session

    async def _find_one(self, *criteria) -> User | None:
        async with self.get_db_session() as session:
            result = await session.execute(select(User).where(*criteria).limit(1))
            return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        return await self._find_one(func.lower(User.email) == email.lower())

    async def find_by_username(self, username: str) -> User | None:
        return await self._find_one(func.lower(User.username) == username.lower())

    async def find_by_phone(self, country_code: str, phone_number: str) -> User | None:
        return await self._find_one(
            User.country_code == country_code,
            User.phone_number == phone_number,
        )

    async def find_by_whatsapp(
        self, country_code: str, phone_number: str
    ) -> User | None:
        return await self._find_one(
            User.whatsapp_country_code == country_code,
            User.whatsapp_phone_number == phone_number,
        )

    async def find_by_identifier(self, identifier: SignInIdentifier) -> User | None:
        if isinstance(identifier, PhoneIdentifier):
            return await self.find_by_phone(
                identifier.country_code, identifier.phone_number
            )
        if isinstance(identifier, WhatsappIdentifier):
            return await self.find_by_whatsapp(
                identifier.country_code, identifier.phone_number
            )
        if isinstance(identifier, EmailIdentifier):
            return await self.find_by_email(identifier.email)
        if isinstance(identifier, UsernameIdentifier):
            return await self.find_by_username(identifier.username)
        assert_never(identifier)

    async def get_by_id(self, user_id: UUID) -> User | None:
        async with self.get_db_session() as session:
            return await session.get(User, user_id)

    async def create(self, new_user: NewUser) -> User:
        async with self.get_db_session() as session:
            user = User(
                email=new_user.email,
                username=new_user.username,
                hashed_password=new_user.hashed_password,
                country_code=new_user.country_code,
                phone_number=new_user.phone_number,
                whatsapp_country_code=new_user.whatsapp_country_code,
                whatsapp_phone_number=new_user.whatsapp_phone_number,
            )
            session.add(user)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise UserAlreadyExistsError() from e
            await session.refresh(user)
            return user
