"""
User model for buyers, realtors and administrators.
Realtors own home listings.
"""

from sqlalchemy import String, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from realtor_api.database import Base
from email_validator import validate_email, EmailNotValidError
import enum
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from realtor_api.models.home import Home


class UserType(str, enum.Enum):
    """User type enumeration."""
    BUYER = "buyer"
    REALTOR = "realtor"
    ADMIN = "admin"


class User(Base):
    """
    User model.
    Realtors are the owners of home listings.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's full name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - must be unique and valid"
    )

    phone: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Contact phone number"
    )

    user_type: Mapped[UserType] = mapped_column(
        SQLEnum(UserType),
        nullable=False,
        default=UserType.BUYER,
        index=True,
        comment="Buyer, realtor or admin"
    )

    homes: Mapped[List["Home"]] = relationship(
        "Home",
        back_populates="realtor",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email}, user_type={self.user_type})>"

    @classmethod
    def validate_email_format(cls, email: str) -> str:
        """
        Validate email format using email-validator.

        Args:
            email: Email address to validate

        Returns:
            Normalized email address

        Raises:
            ValueError: If email format is invalid
        """
        try:
            valid_email = validate_email(email, check_deliverability=False)
            return valid_email.normalized.lower()
        except (EmailNotValidError, TypeError) as e:
            raise ValueError(f"Invalid email format: {str(e)}")

    @property
    def is_realtor(self) -> bool:
        return self.user_type == UserType.REALTOR

    @property
    def is_admin(self) -> bool:
        return self.user_type == UserType.ADMIN
