"""
Home model for real-estate listings.
Handles listing data with location, pricing, and relationship management.
"""

from sqlalchemy import String, Integer, Float, DateTime, Enum as SQLEnum, Index, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from realtor_api.database import Base
from datetime import datetime
import enum
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from realtor_api.models.user import User
    from realtor_api.models.image import Image


class PropertyType(str, enum.Enum):
    """Property type enumeration for listings."""
    RESIDENTIAL = "residential"
    CONDO = "condo"


class Home(Base):
    """
    Home model for managing real-estate listings.
    Each home is owned by a realtor and carries any number of images.
    """

    __tablename__ = "homes"

    # Location information
    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Street address"
    )

    city: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="City the home is located in"
    )

    # Pricing information
    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        index=True,
        comment="Asking price"
    )

    property_type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType),
        nullable=False,
        index=True,
        comment="Residential or condo"
    )

    # Home specifications
    number_of_bedrooms: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of bedrooms"
    )

    number_of_bathrooms: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Number of bathrooms, half baths allowed"
    )

    land_size: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Land size in square metres"
    )

    listed_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="When the home was listed"
    )

    # Foreign key to the owning realtor
    realtor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the realtor who owns this listing"
    )

    # Relationships
    realtor: Mapped["User"] = relationship(
        "User",
        back_populates="homes",
    )

    images: Mapped[List["Image"]] = relationship(
        "Image",
        back_populates="home",
        cascade="all, delete-orphan",
        order_by="Image.id",
    )

    def __repr__(self) -> str:
        """String representation of the home."""
        return f"<Home(id={self.id}, address={self.address}, city={self.city}, price={self.price})>"


# Composite index for the common city and price filter
city_price_index = Index(
    'idx_homes_city_price',
    Home.city,
    Home.price,
)

# Composite index for property type filtering
type_price_index = Index(
    'idx_homes_type_price',
    Home.property_type,
    Home.price,
)
