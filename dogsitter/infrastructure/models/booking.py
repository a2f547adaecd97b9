"""SQLAlchemy models for walking and boarding bookings.

Both services share the columns this package reads or writes; each lives in
its own table named after :class:`~dogsitter.domain.entities.BookingType`.
"""

from sqlalchemy import Column, Date, DateTime, Numeric, String, Time

from dogsitter.domain.entities import BOOKING_STATUS_PENDING, BookingType
from dogsitter.infrastructure.database import Base
from dogsitter.utils import now_in_utc_naive


class _BookingColumns:
    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), nullable=False, index=True)
    sitter_id = Column(String(36), nullable=False, index=True)
    status = Column(String(32), nullable=False, default=BOOKING_STATUS_PENDING)
    total_price = Column(Numeric(10, 2), nullable=True)
    payment_intent_id = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_utc_naive)


class WalkingBookingModel(_BookingColumns, Base):
    __tablename__ = BookingType.WALKING.table_name

    booking_date = Column(Date, nullable=True)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)


class BoardingBookingModel(_BookingColumns, Base):
    __tablename__ = BookingType.BOARDING.table_name

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)


BOOKING_MODELS = {
    BookingType.WALKING: WalkingBookingModel,
    BookingType.BOARDING: BoardingBookingModel,
}


__all__ = ["BOOKING_MODELS", "BoardingBookingModel", "WalkingBookingModel"]
