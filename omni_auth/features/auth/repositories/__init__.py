"""User repositories."""

from .user_repository import NewUser, SqlAlchemyUserRepository, UserRepository

__all__ = ["NewUser", "SqlAlchemyUserRepository", "UserRepository"]
