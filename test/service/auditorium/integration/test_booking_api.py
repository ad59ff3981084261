from typing import Any, Callable

from fastapi.testclient import TestClient
import pytest
from uuid_utils import uuid7

from src.platform.constant.route_constant import BOOKING_BASE, BOOKING_MY_BOOKINGS
from test.shared.utils import (
    available_seats,
    booking_payload,
    create_booking,
    create_show,
)
from test.util_constant import DEFAULT_BALCONY_SEATS, DEFAULT_ORDINARY_SEATS


@pytest.fixture
def show(
    login_as: Callable[[dict[str, Any]], TestClient], manager_user: dict[str, Any]
) -> dict[str, Any]:
    client = login_as(manager_user)
    return create_show(client, days_ahead=10)


@pytest.fixture
def sales_client(
    login_as: Callable[[dict[str, Any]], TestClient],
    show: dict[str, Any],
    salesperson_user: dict[str, Any],
) -> TestClient:
    return login_as(salesperson_user)


@pytest.mark.integration
class TestCreateBookingAPI:
    def test_booking_takes_one_seat(self, sales_client: TestClient, show: dict[str, Any]):
        booking = create_booking(sales_client, show['id'])

        assert booking['status'] == 'active'
        assert booking['seat_type'] == 'ordinary'
        assert booking['seat_number'] == 'O-1'
        assert booking['ticket_price'] == 200
        assert booking['refund_amount'] is None
        assert (
            available_seats(sales_client, show['id'], category='ordinary')
            == DEFAULT_ORDINARY_SEATS - 1
        )

    def test_sold_out_category_rejected(self, sales_client: TestClient, show: dict[str, Any]):
        for n in range(1, DEFAULT_BALCONY_SEATS + 1):
            create_booking(sales_client, show['id'], seat_type='balcony', seat_number=f'B-{n}')

        response = sales_client.post(
            BOOKING_BASE,
            json=booking_payload(show['id'], seat_type='balcony', seat_number='B-99'),
        )

        assert response.status_code == 400
        assert response.json()['detail'] == 'No balcony seats available for this show timing'
        assert available_seats(sales_client, show['id'], category='balcony') == 0

    def test_missing_fields_rejected(self, sales_client: TestClient, show: dict[str, Any]):
        payload = booking_payload(show['id'])
        del payload['spectator_name']
        payload['payment_info'] = '   '

        response = sales_client.post(BOOKING_BASE, json=payload)

        assert response.status_code == 400
        assert 'spectator_name' in response.json()['detail']
        assert 'payment_info' in response.json()['detail']
        assert (
            available_seats(sales_client, show['id'], category='ordinary')
            == DEFAULT_ORDINARY_SEATS
        )

    def test_invalid_seat_type(self, sales_client: TestClient, show: dict[str, Any]):
        response = sales_client.post(
            BOOKING_BASE, json=booking_payload(show['id'], seat_type='box')
        )

        assert response.status_code == 400
        assert response.json()['detail'] == 'Invalid seat_type: box'

    @pytest.mark.parametrize(
        'overrides,detail',
        [
            ({'show_id': 999999}, 'Show not found'),
            ({'timing': '23:59'}, 'Show timing not found'),
        ],
    )
    def test_unknown_show_or_timing(
        self, sales_client: TestClient, show: dict[str, Any], overrides: dict, detail: str
    ):
        response = sales_client.post(BOOKING_BASE, json=booking_payload(show['id'], **overrides))

        assert response.status_code == 404
        assert response.json()['detail'] == detail

    def test_same_seat_cannot_be_booked_twice(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        create_booking(sales_client, show['id'], seat_number='O-7')

        response = sales_client.post(
            BOOKING_BASE, json=booking_payload(show['id'], seat_number='O-7')
        )

        assert response.status_code == 409
        assert (
            available_seats(sales_client, show['id'], category='ordinary')
            == DEFAULT_ORDINARY_SEATS - 1
        )

    def test_seat_is_free_again_after_cancel(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'], seat_number='O-7')
        sales_client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        rebooked = create_booking(sales_client, show['id'], seat_number='O-7')

        assert rebooked['id'] != booking['id']

    def test_requires_login(self, client: TestClient, show: dict[str, Any]):
        client.cookies.clear()

        response = client.post(BOOKING_BASE, json=booking_payload(show['id']))

        assert response.status_code == 401


@pytest.mark.integration
class TestCancelBookingAPI:
    def test_cancel_frees_one_seat_with_policy_refund(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'], seat_type='balcony', seat_number='B-1')
        assert (
            available_seats(sales_client, show['id'], category='balcony')
            == DEFAULT_BALCONY_SEATS - 1
        )

        response = sales_client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        assert response.status_code == 200
        data = response.json()
        assert data['status'] == 'cancelled'
        assert data['refund_amount'] == 295
        assert data['cancelled_at'] is not None
        assert available_seats(sales_client, show['id'], category='balcony') == (
            DEFAULT_BALCONY_SEATS
        )

    def test_cancel_twice_conflicts_and_keeps_inventory(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'])
        first = sales_client.patch(f'{BOOKING_BASE}/{booking["id"]}')
        assert first.status_code == 200

        second = sales_client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        assert second.status_code == 409
        assert second.json()['detail'] == 'Booking is already cancelled'
        assert (
            available_seats(sales_client, show['id'], category='ordinary')
            == DEFAULT_ORDINARY_SEATS
        )

    def test_supplied_refund_is_stored_verbatim(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'], seat_type='balcony', seat_number='B-1')

        response = sales_client.patch(
            f'{BOOKING_BASE}/{booking["id"]}', json={'refund_amount': 290}
        )

        assert response.status_code == 200
        assert response.json()['refund_amount'] == 290
        stored = sales_client.get(f'{BOOKING_BASE}/{booking["id"]}').json()
        assert stored['status'] == 'cancelled'
        assert stored['refund_amount'] == 290

    def test_refund_above_policy_rejected(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'], seat_type='balcony', seat_number='B-1')

        response = sales_client.patch(
            f'{BOOKING_BASE}/{booking["id"]}', json={'refund_amount': 296}
        )

        assert response.status_code == 400
        assert 'exceeds the refund policy amount' in response.json()['detail']
        stored = sales_client.get(f'{BOOKING_BASE}/{booking["id"]}').json()
        assert stored['status'] == 'active'
        assert (
            available_seats(sales_client, show['id'], category='balcony')
            == DEFAULT_BALCONY_SEATS - 1
        )

    def test_negative_refund_rejected(self, sales_client: TestClient, show: dict[str, Any]):
        booking = create_booking(sales_client, show['id'])

        response = sales_client.patch(
            f'{BOOKING_BASE}/{booking["id"]}', json={'refund_amount': -1}
        )

        assert response.status_code == 400

    def test_unknown_booking(self, sales_client: TestClient, show: dict[str, Any]):
        response = sales_client.patch(f'{BOOKING_BASE}/{uuid7()}')

        assert response.status_code == 404
        assert response.json()['detail'] == 'Booking not found'

    def test_other_salesperson_cannot_cancel(
        self,
        login_as: Callable[[dict[str, Any]], TestClient],
        sales_client: TestClient,
        show: dict[str, Any],
        another_salesperson_user: dict[str, Any],
    ):
        booking = create_booking(sales_client, show['id'])

        client = login_as(another_salesperson_user)
        response = client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        assert response.status_code == 403
        assert (
            available_seats(client, show['id'], category='ordinary')
            == DEFAULT_ORDINARY_SEATS - 1
        )

    def test_manager_can_cancel_any_booking(
        self,
        login_as: Callable[[dict[str, Any]], TestClient],
        sales_client: TestClient,
        show: dict[str, Any],
        manager_user: dict[str, Any],
    ):
        booking = create_booking(sales_client, show['id'])

        client = login_as(manager_user)
        response = client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        assert response.status_code == 200
        assert response.json()['status'] == 'cancelled'


@pytest.mark.integration
class TestBookingQueriesAPI:
    def test_my_bookings_newest_first(self, sales_client: TestClient, show: dict[str, Any]):
        first = create_booking(sales_client, show['id'], seat_number='O-1')
        second = create_booking(sales_client, show['id'], seat_number='O-2')

        response = sales_client.get(BOOKING_MY_BOOKINGS)

        assert response.status_code == 200
        bookings = response.json()
        assert [b['id'] for b in bookings] == [second['id'], first['id']]
        assert bookings[0]['show_date'] == show['show_date']
        assert bookings[0]['payment_info'] == 'card **** 4242'

    def test_my_bookings_only_lists_own(
        self,
        login_as: Callable[[dict[str, Any]], TestClient],
        sales_client: TestClient,
        show: dict[str, Any],
        another_salesperson_user: dict[str, Any],
    ):
        create_booking(sales_client, show['id'])

        client = login_as(another_salesperson_user)
        response = client.get(BOOKING_MY_BOOKINGS)

        assert response.status_code == 200
        assert response.json() == []

    def test_refund_quote(self, sales_client: TestClient, show: dict[str, Any]):
        booking = create_booking(sales_client, show['id'])

        response = sales_client.get(f'{BOOKING_BASE}/{booking["id"]}/refund_quote')

        assert response.status_code == 200
        quote = response.json()
        assert quote['refundable'] is True
        assert quote['ticket_price'] == 200
        assert quote['refund_amount'] == 195
        assert quote['days_until_show'] >= 9

    def test_refund_quote_for_cancelled_booking(
        self, sales_client: TestClient, show: dict[str, Any]
    ):
        booking = create_booking(sales_client, show['id'])
        sales_client.patch(f'{BOOKING_BASE}/{booking["id"]}')

        quote = sales_client.get(f'{BOOKING_BASE}/{booking["id"]}/refund_quote').json()

        assert quote['refundable'] is False
        assert quote['refund_amount'] == 0

    def test_other_salesperson_cannot_view(
        self,
        login_as: Callable[[dict[str, Any]], TestClient],
        sales_client: TestClient,
        show: dict[str, Any],
        another_salesperson_user: dict[str, Any],
    ):
        booking = create_booking(sales_client, show['id'])

        client = login_as(another_salesperson_user)
        response = client.get(f'{BOOKING_BASE}/{booking["id"]}')

        assert response.status_code == 403
