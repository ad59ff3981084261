from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.auditorium.driven_adapter.model.show_model import ShowModel


_ACTIVE_ONLY = text("status = 'active'")


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    show_id: Mapped[int] = mapped_column(ForeignKey('show.id'), nullable=False, index=True)
    show_time: Mapped[str] = mapped_column(String(32), nullable=False)
    seat_type: Mapped[str] = mapped_column(String(20), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(20), nullable=False)
    spectator_name: Mapped[str] = mapped_column(String(255), nullable=False)
    payment_info: Mapped[str] = mapped_column(String(255), nullable=False)
    booked_by: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    ticket_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='active', nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cancelled_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    refund_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    show: Mapped['ShowModel'] = relationship(
        'ShowModel',
        viewonly=True,
        lazy='selectin',
    )

    __table_args__ = (
        # One active booking per seat; cancelled rows fall out of the index
        Index(
            'ix_booking_active_seat',
            'show_id',
            'show_time',
            'seat_type',
            'seat_number',
            unique=settings.ENFORCE_UNIQUE_SEAT_NUMBER,
            postgresql_where=_ACTIVE_ONLY,
            sqlite_where=_ACTIVE_ONLY,
        ),
        Index('ix_booking_booked_by_created_at', 'booked_by', 'created_at'),
    )
