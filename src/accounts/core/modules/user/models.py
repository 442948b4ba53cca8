from uuid import UUID

from pydantic import BaseModel, Field

from accounts.core.db import MongoModel


class User(MongoModel):
    """Account record with credentials. Indexed on email - unique."""

    name: str
    email: str
    password_hash: str  # bcrypt hash


class UserView(BaseModel):
    """Account information (API representation), never includes the password hash."""

    id: UUID = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, name=user.name, email=user.email)


class LoggedInUserView(UserView):
    """Account information returned by login, with the issued session token."""

    token: str = Field(..., description="Bearer token for subsequent requests")
