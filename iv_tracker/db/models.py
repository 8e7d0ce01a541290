from __future__ import annotations
from datetime import datetime
from sqlalchemy import Integer, String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base

class TrackerRecord(Base):
    __tablename__ = "trackers"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    species: Mapped[str] = mapped_column(String(64), default="")
    generation: Mapped[int] = mapped_column(Integer, default=5)
    evolution: Mapped[int] = mapped_column(Integer, default=0)
    starting_level: Mapped[int] = mapped_column(Integer, default=5)

    # estructuras anidadas como JSON
    base_stats_json: Mapped[str] = mapped_column(Text)
    ev_segments_json: Mapped[str] = mapped_column(Text)
    recorded_stats_json: Mapped[str] = mapped_column(Text)
    static_ivs_json: Mapped[str] = mapped_column(Text)
    direct_input_ivs_json: Mapped[str] = mapped_column(Text)

    static_nature: Mapped[str | None] = mapped_column(String(32), nullable=True)
    direct_input: Mapped[int] = mapped_column(Integer, default=0)   # 0/1
    manual_positive_nature: Mapped[str | None] = mapped_column(String(16), nullable=True)
    manual_negative_nature: Mapped[str | None] = mapped_column(String(16), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
