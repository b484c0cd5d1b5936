from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from boutique.core.auth.service import AuthService
from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.shared.database.models import User, UserRole, ROLE_ADMIN, ROLE_USER
from .repository import UserRepository
from .schemas import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def insert(self, data: UserCreate) -> User:
        """
        Create a user.

        The password is stored hashed. A user created without roles
        gets the 'user' role.
        """
        name, email = self._validate(data)
        self._ensure_email_available(email)
        if not data.password:
            logger.warning("User rejected: missing password")
            raise IntegrityViolationError("Invalid password")

        user = User(
            name=name,
            email=email,
            password_hash=AuthService.get_password_hash(data.password),
            is_active=data.is_active,
        )
        self._assign_roles(user, data.roles or [ROLE_USER])
        user = self.repository.create(user)
        logger.info(f"User {user.id} created with roles {user.roles}")
        return user

    def find_by_id(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def list_all(self) -> List[User]:
        users = self.repository.get_all()
        if not users:
            raise NotFoundError("No user registered")
        return users

    def update(self, user_id: int, data: UserCreate) -> User:
        """Replace a user; the stored password is kept when none is sent"""
        user = self.find_by_id(user_id)
        name, email = self._validate(data)
        self._ensure_email_available(email, exclude_user_id=user_id)

        user.name = name
        user.email = email
        user.is_active = data.is_active
        if data.password:
            user.password_hash = AuthService.get_password_hash(data.password)
        if data.roles is not None:
            self._assign_roles(user, data.roles or [ROLE_USER])

        user = self.repository.save(user)
        logger.info(f"User {user_id} updated")
        return user

    def delete(self, user_id: int) -> None:
        user = self.find_by_id(user_id)
        self.repository.delete(user)
        logger.info(f"User {user_id} deleted")

    def ensure_admin(self, email: str, password: str, name: str) -> Optional[User]:
        """Create an admin account unless the email is already registered"""
        if self.repository.find_by_email(email) is not None:
            return None
        logger.info(f"Creating start-up admin {email}")
        return self.insert(UserCreate(name=name, email=email, password=password, roles=[ROLE_ADMIN]))

    def find_by_name_starting_with_ignore_case(self, name: str) -> List[User]:
        users = self.repository.find_by_name_starting_with_ignore_case(name)
        if not users:
            raise NotFoundError("No user found")
        return users

    def find_by_name(self, name: str) -> List[User]:
        """Users whose name is exactly name"""
        users = self.repository.find_by_name(name.strip())
        if not users:
            raise NotFoundError("No user found")
        return users

    def find_by_email(self, email: str) -> User:
        user = self.repository.find_by_email(email)
        if user is None:
            raise NotFoundError(f"User {email} not found")
        return user

    @staticmethod
    def _assign_roles(user: User, roles: List[str]) -> None:
        """Make the user's role set equal to roles, reusing rows that stay"""
        kept = [entry for entry in user.role_entries if entry.role in roles]
        current = {entry.role for entry in kept}
        user.role_entries = kept + [UserRole(role=role) for role in roles if role not in current]

    # ===== VALIDATION =====

    def _validate(self, data: UserCreate):
        if data.name is None or not data.name.strip():
            logger.warning("User rejected: blank name")
            raise IntegrityViolationError("Invalid name")
        email = (data.email or "").strip().lower()
        if not email or "@" not in email:
            logger.warning("User rejected: invalid email")
            raise IntegrityViolationError("Invalid email")
        return data.name.strip(), email

    def _ensure_email_available(self, email: str, exclude_user_id: Optional[int] = None) -> None:
        existing = self.repository.find_by_email(email)
        if existing is not None and existing.id != exclude_user_id:
            logger.warning(f"User rejected: email {email} already registered")
            raise IntegrityViolationError("Email already registered", details={"email": email})
