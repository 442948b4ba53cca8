from datetime import timedelta
from typing import Any
from uuid import UUID, uuid4

import jwt
from pymongo.asynchronous.database import AsyncDatabase

from accounts.config import Config
from accounts.core.core import Service
from accounts.core.modules.token.models import AuthToken
from accounts.utils import now

ALGORITHM = "HS256"


class TokenService(Service):
    """Issues signed, expiring session tokens (JWT)."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]], config: Config) -> None:
        super().__init__(database, config)
        self._secret = config.jwt_secret
        self._ttl = timedelta(seconds=config.token_ttl_seconds)

    def issue_token(self, user_id: UUID) -> AuthToken:
        """Sign a token whose subject is the given account id."""
        issued_at = now()
        payload = {
            "sub": str(user_id),
            "id": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self._ttl,
            "jti": uuid4().hex,
        }
        return AuthToken(jwt.encode(payload, self._secret, algorithm=ALGORITHM))

    def decode_token(self, token: str) -> UUID:
        """Verify signature and expiry and return the subject account id.

        Raises jwt.InvalidTokenError (including ExpiredSignatureError) on failure.
        """
        payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM], options={"require": ["sub", "exp", "iat"]})
        return UUID(payload["sub"])
