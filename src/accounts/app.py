from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from accounts.config import Config
from accounts.core.core import Core
from accounts.core.modules.user.models import LoggedInUserView, UserView
from accounts.errors import InternalError, UserError

logger = structlog.get_logger(__name__)


class App:
    """Facade for account operations.

    User-facing failures propagate as UserError subclasses. Anything else raised
    by the store, hashing or signing is logged here and replaced by InternalError.
    """

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def register(self, name: str, email: str, password: str) -> UserView:
        """Create a new account. No token is issued; the caller logs in afterwards."""
        try:
            user = await self._core.services.user.create_user(name, email, password)
        except UserError:
            raise
        except Exception as e:
            logger.exception("register_failed")
            raise InternalError from e
        return UserView.from_domain(user)

    async def login(self, email: str, password: str) -> LoggedInUserView:
        """Check credentials and issue a session token."""
        try:
            user = await self._core.services.user.authenticate(email, password)
            token = self._core.services.token.issue_token(user.id)
        except UserError:
            raise
        except Exception as e:
            logger.exception("login_error")
            raise InternalError from e
        logger.info("login_succeeded", user_id=str(user.id))
        return LoggedInUserView(id=user.id, name=user.name, email=user.email, token=token)
