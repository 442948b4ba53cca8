from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from accounts.config import Config
from accounts.core.core import Service
from accounts.core.modules.user.models import User
from accounts.core.modules.user.passwords import hash_password, verify_password
from accounts.errors import DuplicateAccountError, InvalidCredentialsError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Stores account records and checks credentials against them."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._collection = database.get_collection("users")

    async def get_user_by_email(self, email: str) -> User | None:
        """Get account by email, or None if there is no such account."""
        doc = await self._collection.find_one({"email": email})
        if doc is None:
            return None
        return User.model_validate(doc)

    async def create_user(self, name: str, email: str, password: str) -> User:
        """Create account with hashed password. Email must not be taken."""
        if await self.get_user_by_email(email) is not None:
            raise DuplicateAccountError

        password_hash = hash_password(password, self.config.bcrypt_rounds)
        user = User(name=name, email=email, password_hash=password_hash)
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            # A concurrent registration won the race; the unique index rejected ours
            raise DuplicateAccountError from e

        logger.info("user_registered", user_id=str(user.id))
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Return the account if the password matches.

        Unknown email and wrong password raise the same error.
        """
        user = await self.get_user_by_email(email)
        if user is None:
            logger.info("login_failed", reason="unknown_email")
            raise InvalidCredentialsError
        if not verify_password(password, user.password_hash):
            logger.info("login_failed", reason="wrong_password", user_id=str(user.id))
            raise InvalidCredentialsError
        return user

    async def on_start(self) -> None:
        """Create indexes."""
        await self._collection.create_index([("email", 1)], unique=True)
        logger.debug("user_service_started")
