from typing import Optional
from datetime import time
from sqlalchemy import Integer, String, Time, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from servicerota.db.database import Base


class ZoneRolesNeeded(Base):
    __tablename__ = "zone_roles_needed"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    zone_id: Mapped[int] = mapped_column(Integer, ForeignKey("restaurant_zones.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # free text, e.g. "Monday", "tues"
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    required_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    shift_start: Mapped[time] = mapped_column(Time, nullable=False)
    shift_end: Mapped[time] = mapped_column(Time, nullable=False)
