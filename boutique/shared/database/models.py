# boutique/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Date, Text,
    ForeignKey, UniqueConstraint, func
)
from sqlalchemy.orm import relationship

from boutique.config.database import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"
KNOWN_ROLES = (ROLE_ADMIN, ROLE_USER)


# =====================================================
# CATALOG
# =====================================================

class Category(Base):
    """Product category"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, description='{self.description}')>"


# =====================================================
# CLIENTS
# =====================================================

class Client(Base):
    """Boutique client"""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    address = Column(Text)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    phones = relationship("Phone", back_populates="client", cascade="all, delete-orphan")
    sells = relationship("Sell", back_populates="client", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.name}')>"


class Phone(Base):
    """Phone number owned by a client"""
    __tablename__ = "phones"

    id = Column(Integer, primary_key=True, index=True)
    number = Column(String(50), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)

    # Relationships
    client = relationship("Client", back_populates="phones")

    def __repr__(self):
        return f"<Phone(id={self.id}, number='{self.number}', client_id={self.client_id})>"


# =====================================================
# SALES
# =====================================================

class Sell(Base):
    """Sale made to a client on a given date"""
    __tablename__ = "sells"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    client = relationship("Client", back_populates="sells")

    @property
    def client_name(self) -> str:
        return self.client.name if self.client else None

    def __repr__(self):
        return f"<Sell(id={self.id}, client_id={self.client_id}, date={self.date})>"


# =====================================================
# USERS
# =====================================================

class User(Base):
    """API user"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    role_entries = relationship("UserRole", back_populates="user", cascade="all, delete-orphan")

    @property
    def roles(self) -> list:
        return sorted(entry.role for entry in self.role_entries)

    def has_any_role(self, roles) -> bool:
        return bool(set(self.roles) & set(roles))

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class UserRole(Base):
    """Role granted to a user"""
    __tablename__ = "user_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False)

    # Relationships
    user = relationship("User", back_populates="role_entries")
