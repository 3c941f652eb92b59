# src/auth/services.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from auth.models import User
from config import settings
from storage.base import Storage

logger = logging.getLogger(__name__)


class InactiveUserError(Exception):
    """Raised when a disabled account tries to log in."""


class AuthService:
    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        to_encode = data.copy()
        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def decode_access_token(token: str) -> Optional[str]:
        """Return the user id carried by a token, or None if it is invalid or expired."""
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError as e:
            logger.info(f"Rejected access token: {str(e)}")
            return None
        return payload.get("sub")

    @staticmethod
    async def authenticate_user(username: str, password: str, storage: Storage) -> Optional[User]:
        """Look the user up by username and check the password.

        The active flag is checked before the password, so a disabled account
        is reported as such even when the password is wrong.
        """
        user = await storage.get_user_by_username(username)
        if not user:
            return None
        if not user.is_active:
            raise InactiveUserError(username)
        if user.password != password:
            return None
        return user

    @staticmethod
    async def login(
            username: str,
            password: str,
            ip_address: Optional[str],
            user_agent: Optional[str],
            storage: Storage
    ) -> Optional[User]:
        """Authenticate and record the login. Returns the user as it was before the login."""
        user = await AuthService.authenticate_user(username, password, storage)
        if not user:
            logger.info(f"Failed login for username {username!r} from {ip_address}")
            return None
        await storage.update_user_login(user.id, ip_address, user_agent)
        logger.info(f"User {user.username} logged in from {ip_address}")
        return user
