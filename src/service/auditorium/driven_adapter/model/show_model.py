from datetime import date, datetime
from decimal import Decimal
from typing import List

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


class ShowModel(Base):
    __tablename__ = 'show'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    show_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    number_of_shows: Mapped[int] = mapped_column(Integer, nullable=False)
    manager_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    performances: Mapped[List['PerformanceModel']] = relationship(
        back_populates='show',
        cascade='all, delete-orphan',
        order_by='PerformanceModel.id',
        lazy='selectin',
    )

    __table_args__ = (CheckConstraint('number_of_shows >= 1', name='ck_show_number_of_shows'),)


class PerformanceModel(Base):
    __tablename__ = 'performance'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    show_id: Mapped[int] = mapped_column(
        ForeignKey('show.id', ondelete='CASCADE'), nullable=False, index=True
    )
    timing: Mapped[str] = mapped_column(String(32), nullable=False)

    show: Mapped['ShowModel'] = relationship(back_populates='performances')
    seat_categories: Mapped[List['SeatCategoryModel']] = relationship(
        back_populates='performance',
        cascade='all, delete-orphan',
        order_by='SeatCategoryModel.id',
        lazy='selectin',
    )

    __table_args__ = (UniqueConstraint('show_id', 'timing', name='uq_performance_show_timing'),)


class SeatCategoryModel(Base):
    __tablename__ = 'seat_category'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    performance_id: Mapped[int] = mapped_column(
        ForeignKey('performance.id', ondelete='CASCADE'), nullable=False, index=True
    )
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    performance: Mapped['PerformanceModel'] = relationship(back_populates='seat_categories')

    __table_args__ = (
        UniqueConstraint('performance_id', 'category', name='uq_seat_category_performance'),
        CheckConstraint('total_seats >= 0', name='ck_seat_category_total_seats'),
        CheckConstraint(
            'available_seats >= 0 AND available_seats <= total_seats',
            name='ck_seat_category_available_seats',
        ),
        CheckConstraint('price >= 0', name='ck_seat_category_price'),
    )
