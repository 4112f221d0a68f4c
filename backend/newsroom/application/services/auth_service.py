"""Administrator authentication — sign-up, sign-in and token resolution."""

import logging

from newsroom.application.interfaces import UserRepository
from newsroom.application.schemas import AdminSignInRequest, AdminSignUpRequest
from newsroom.domain.entities import ROLE_ADMIN, Requester, User
from newsroom.domain.exceptions import AuthenticationError, DuplicateEntityError
from newsroom.infrastructure.security.password_hasher import hash_password, verify_password
from newsroom.infrastructure.security.token_signer import TokenSigner

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password."


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    """Issues access tokens to administrators.

    An administrator is a ``User`` whose roles include ``ADMIN``; sign-up
    always grants that role.
    """

    def __init__(self, user_repository: UserRepository, token_signer: TokenSigner):
        self._users = user_repository
        self._tokens = token_signer

    async def verify_role_admin(self, credentials: AdminSignInRequest) -> str:
        """Check credentials and the ADMIN role, then return a signed token.

        Unknown email and wrong password raise the same error.
        """
        user = await self._users.get_by_email(_normalize_email(credentials.email))
        if user is None or not verify_password(credentials.password, user.password_hash):
            logger.info("Admin sign-in rejected for %s", _normalize_email(credentials.email))
            raise AuthenticationError(_INVALID_CREDENTIALS)

        if not user.is_admin:
            raise AuthenticationError("Administrator privileges required.")

        logger.info("Admin signed in: user_id=%s", user.id)
        return self._tokens.issue(user_id=user.id, email=user.email, roles=user.roles)

    async def sign_up_admin(self, data: AdminSignUpRequest) -> User:
        email = _normalize_email(data.email)
        if await self._users.get_by_email(email) is not None:
            raise DuplicateEntityError("User", "email", email)

        user = User(
            email=email,
            password_hash=hash_password(data.password),
            roles=[ROLE_ADMIN],
        )
        created = await self._users.create(user)
        logger.info("Admin account created: user_id=%s", created.id)
        return created

    async def get_requester(self, access_token: str) -> Requester:
        """Resolve the user behind a bearer token."""
        claims = self._tokens.decode(access_token)

        subject = str(claims.get("sub") or "").strip()
        if not subject.isdigit():
            raise AuthenticationError("Invalid access token subject.")

        user = await self._users.get_by_id(int(subject))
        if user is None:
            raise AuthenticationError("User not found.")
        return Requester(id=user.id, email=user.email, roles=list(user.roles))
