from sqlalchemy import Integer, String, DateTime, ForeignKey, func
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from servicerota.db.database import Base

class RestaurantZones(Base):
    __tablename__ = "restaurant_zones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    restaurant_id: Mapped[int] = mapped_column(Integer, ForeignKey("restaurants.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
