from decimal import Decimal

from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Booking core metrics collector

    Tracks booking throughput per seat type, failure reasons, refunds paid
    out and the remaining inventory of each seat category.
    """

    def __init__(self) -> None:
        self.bookings_created = Counter(
            'auditorium_bookings_created_total',
            'Total bookings created',
            ['seat_type'],
        )

        self.bookings_cancelled = Counter(
            'auditorium_bookings_cancelled_total',
            'Total bookings cancelled',
            ['seat_type'],
        )

        self.booking_failures = Counter(
            'auditorium_booking_failures_total',
            'Booking or cancellation requests rejected',
            ['operation', 'reason'],  # reason: error class name
        )

        self.refund_amount = Counter(
            'auditorium_refund_amount_total',
            'Sum of refund amounts granted on cancellation',
            ['seat_type'],
        )

        self.booking_duration = Histogram(
            'auditorium_booking_duration_seconds',
            'Booking use case processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.available_seats = Gauge(
            'auditorium_available_seats',
            'Available seats after the last inventory change',
            ['show_id', 'timing', 'seat_type'],
        )

    def record_booking_created(
        self, *, show_id: int, timing: str, seat_type: str, available_seats: int, duration: float
    ) -> None:
        self.bookings_created.labels(seat_type=seat_type).inc()
        self.booking_duration.labels(operation='create').observe(duration)
        self.available_seats.labels(show_id=show_id, timing=timing, seat_type=seat_type).set(
            available_seats
        )

    def record_booking_cancelled(
        self,
        *,
        show_id: int,
        timing: str,
        seat_type: str,
        available_seats: int,
        refund_amount: Decimal,
        duration: float,
    ) -> None:
        self.bookings_cancelled.labels(seat_type=seat_type).inc()
        self.refund_amount.labels(seat_type=seat_type).inc(float(refund_amount))
        self.booking_duration.labels(operation='cancel').observe(duration)
        self.available_seats.labels(show_id=show_id, timing=timing, seat_type=seat_type).set(
            available_seats
        )

    def record_failure(self, *, operation: str, error: Exception) -> None:
        self.booking_failures.labels(operation=operation, reason=type(error).__name__).inc()


# Global metrics instance
metrics = BookingMetrics()
