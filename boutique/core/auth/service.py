from datetime import datetime, timedelta
from typing import Optional
import logging

from jose import jwt, JWTError
from passlib.context import CryptContext
from boutique.config.settings import settings
from boutique.shared.database.models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> str:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES].decode("utf-8", "ignore")


class AuthService:
    """
    Credentials for the boutique API.

    Passwords are stored as bcrypt hashes. Access tokens are signed JWTs
    whose claims describe one user: ``sub`` and ``user_id`` (the user id),
    ``email``, ``roles`` and the ``iat``/``exp`` timestamps.
    """

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        try:
            return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Unreadable password hash: {e}")
            return False

    @staticmethod
    def get_password_hash(password: str) -> str:
        return pwd_context.hash(_bcrypt_input(password))

    @staticmethod
    def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
        """Sign a token for user; roles are read from the user at issue time"""
        if user.id is None:
            raise ValueError("Cannot issue a token for an unsaved user")

        issued_at = datetime.utcnow()
        lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
        claims = {
            "sub": str(user.id),
            "user_id": user.id,
            "email": user.email,
            "roles": user.roles,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)

    @staticmethod
    def verify_token(token: str) -> Optional[dict]:
        """Claims of a valid token, or None when the signature or expiry fails"""
        try:
            return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        except JWTError:
            return None

    @staticmethod
    def user_id_from_token(token: str) -> Optional[int]:
        claims = AuthService.verify_token(token)
        if claims is None:
            return None
        user_id = claims.get("user_id")
        return user_id if isinstance(user_id, int) else None
