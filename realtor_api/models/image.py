"""
Image model for home listing pictures.
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from realtor_api.database import Base
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from realtor_api.models.home import Home


class Image(Base):
    """Image of a home, stored by url."""

    __tablename__ = "images"

    url: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Public url of the image"
    )

    home_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("homes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the home this image belongs to"
    )

    home: Mapped["Home"] = relationship(
        "Home",
        back_populates="images",
    )

    def __repr__(self) -> str:
        """String representation of the image."""
        return f"<Image(id={self.id}, home_id={self.home_id}, url={self.url})>"
