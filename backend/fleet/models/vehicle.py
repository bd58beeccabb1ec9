from datetime import datetime

from sqlalchemy import String, Integer, Boolean, DateTime, func, false
from sqlalchemy.orm import Mapped, mapped_column
from fleet.db.base import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    vin: Mapped[str] = mapped_column(String(64), index=True)
    company: Mapped[str] = mapped_column(String(128))
    status: Mapped[str | None] = mapped_column(String(64), nullable=True)
    transport_type: Mapped[str] = mapped_column(String(32), default="regular", server_default="regular")

    cargo_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cargo_weight: Mapped[str | None] = mapped_column(String(64), nullable=True)
    cargo_size: Mapped[str | None] = mapped_column(String(64), nullable=True)

    mintrans_permit: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    escort_received: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())

    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
