from __future__ import annotations

from http.cookiejar import CookieJar

import httpx

from ..api.models import AuthEnvelope, RegisterRequest, User
from ..config import ServiceConfig
from ..domain import endpoints
from ..domain.credentials import CredentialStore
from ..domain.errors import ClientError
from ..logging_conf import get_logger
from .executor import RequestExecutor

logger = get_logger("chat_client.auth")


class AuthService:
    """Login, registration and session lifecycle.

    Auth calls never carry the bearer token: they either precede identity or
    establish it. Each successful login/register/refresh replaces the
    credential in the shared store.
    """

    def __init__(
        self,
        config: ServiceConfig,
        credentials: CredentialStore,
        *,
        cookies: CookieJar | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._executor = RequestExecutor(
            config,
            cookies=cookies,
            request_logger=logger,
            transport=transport,
        )

    async def login(self, username: str, password: str) -> User:
        """Authenticate and store the returned credential.

        Failures propagate unchanged and leave the stored credential as is.
        """
        envelope: AuthEnvelope = await self._executor.execute(
            endpoints.AUTH_LOGIN,
            "POST",
            {"username": username, "password": password},
            response_type=AuthEnvelope,
        )
        self._credentials.set_credential(envelope.token)
        logger.info("auth.login", extra={"event": "auth_login", "user_id": envelope.user.id})
        return envelope.user

    async def register(self, user_data: RegisterRequest) -> User:
        """Create an account, then behave exactly like a successful login."""
        envelope: AuthEnvelope = await self._executor.execute(
            endpoints.AUTH_REGISTER,
            "POST",
            {"username": user_data.username, "password": user_data.password},
            response_type=AuthEnvelope,
        )
        self._credentials.set_credential(envelope.token)
        logger.info(
            "auth.register", extra={"event": "auth_register", "user_id": envelope.user.id}
        )
        return envelope.user

    async def logout(self) -> None:
        """Notify the server, then clear the credential whatever the outcome.

        A failed call is logged and not raised; the local session ends either way.
        """
        try:
            await self._executor.execute(endpoints.AUTH_LOGOUT, "POST")
        except ClientError as e:
            logger.warning(
                "auth.logout_failed",
                extra={"event": "auth_logout_failed", "code": e.code, "error": str(e)},
            )
        finally:
            self._credentials.clear_credential()
        logger.info("auth.logout", extra={"event": "auth_logout"})

    async def refresh_token(self) -> User:
        """Exchange the current session for a fresh credential.

        On failure the old credential stays in place (possibly stale).
        """
        envelope: AuthEnvelope = await self._executor.execute(
            endpoints.AUTH_REFRESH,
            "POST",
            response_type=AuthEnvelope,
        )
        self._credentials.set_credential(envelope.token)
        logger.info("auth.refresh", extra={"event": "auth_refresh", "user_id": envelope.user.id})
        return envelope.user

    async def get_current_user(self) -> User | None:
        """Return the signed-in user, or None if the session is not valid.

        Any client failure (401, transport error, bad body) clears the stored
        credential and is reported as None rather than raised.
        """
        try:
            return await self._executor.execute(endpoints.AUTH_ME, "GET", response_type=User)
        except ClientError as e:
            self._credentials.clear_credential()
            logger.info(
                "auth.session_invalid",
                extra={"event": "auth_session_invalid", "code": e.code},
            )
            return None
