"""Tests for the App facade: registration, login and failure masking."""

from unittest.mock import AsyncMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError
from structlog.testing import capture_logs

from accounts.errors import DuplicateAccountError, ErrorKind, InternalError, InvalidCredentialsError


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_then_login(self, app):
        async with app.lifespan():
            created = await app.register("Ann", "ann@x.com", "secret1")
            logged_in = await app.login("ann@x.com", "secret1")

        assert logged_in.id == created.id
        assert logged_in.name == "Ann"
        assert logged_in.email == "ann@x.com"
        assert logged_in.token

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, app):
        async with app.lifespan():
            await app.register("Ann", "ann@x.com", "secret1")
            with pytest.raises(DuplicateAccountError) as exc_info:
                await app.register("Ann", "ann@x.com", "secret1")

        assert exc_info.value.kind == ErrorKind.DUPLICATE_ACCOUNT

    @pytest.mark.asyncio
    async def test_store_failure_becomes_internal_error(self, app):
        app._core.services.user._collection.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

        with capture_logs() as logs, pytest.raises(InternalError) as exc_info:
            await app.register("Ann", "ann@x.com", "secret1")

        assert str(exc_info.value) == "Internal server error"
        failures = [entry for entry in logs if entry["event"] == "register_failed"]
        assert len(failures) == 1
        assert failures[0]["exc_info"] is True
        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)


class TestLogin:
    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email(self, app):
        await app.register("Ann", "ann@x.com", "secret1")

        with pytest.raises(InvalidCredentialsError) as wrong:
            await app.login("ann@x.com", "wrong")
        with pytest.raises(InvalidCredentialsError) as unknown:
            await app.login("bob@x.com", "secret1")

        assert str(wrong.value) == str(unknown.value)

    @pytest.mark.asyncio
    async def test_repeated_login_issues_distinct_tokens_for_same_account(self, app):
        created = await app.register("Ann", "ann@x.com", "secret1")

        first = await app.login("ann@x.com", "secret1")
        second = await app.login("ann@x.com", "secret1")

        token_service = app._core.services.token
        assert first.token != second.token
        assert token_service.decode_token(first.token) == token_service.decode_token(second.token) == created.id

    @pytest.mark.asyncio
    async def test_signing_failure_becomes_internal_error(self, app, monkeypatch):
        await app.register("Ann", "ann@x.com", "secret1")

        def broken_encode(*_args, **_kwargs):
            raise RuntimeError("signing backend unavailable")

        monkeypatch.setattr("accounts.core.modules.token.service.jwt.encode", broken_encode)

        with capture_logs() as logs, pytest.raises(InternalError) as exc_info:
            await app.login("ann@x.com", "secret1")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        failures = [entry for entry in logs if entry["event"] == "login_error"]
        assert len(failures) == 1
        assert failures[0]["exc_info"] is True
        assert not any(entry["event"] == "login_succeeded" for entry in logs)


class TestLongPasswords:
    @pytest.mark.asyncio
    async def test_password_over_72_bytes_registers_and_logs_in(self, app):
        password = "p" * 80

        await app.register("Ann", "ann@x.com", password)
        user = await app.login("ann@x.com", password)

        assert user.token
        with pytest.raises(InvalidCredentialsError):
            await app.login("ann@x.com", "q" * 80)
