from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    BOOKING_BASE,
    SHOW_BASE,
    USER_CREATE,
    USER_LOGIN,
)
from test.util_constant import (
    DEFAULT_BALCONY_PRICE,
    DEFAULT_BALCONY_SEATS,
    DEFAULT_ORDINARY_PRICE,
    DEFAULT_ORDINARY_SEATS,
    DEFAULT_TIMING,
    TEST_ADDRESS,
    TEST_PHONE_NUMBER,
)


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Helper function to login a user and set cookies."""
    login_response = client.post(
        USER_LOGIN,
        json={'email': email, 'password': password},
    )
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    if 'fastapiusersauth' in login_response.cookies:
        client.cookies.set('fastapiusersauth', login_response.cookies['fastapiusersauth'])
    return login_response


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient,
    email: str,
    password: str,
    name: str,
    role: str,
    manager_id: Optional[int] = None,
    address: str = TEST_ADDRESS,
    phone_number: str = TEST_PHONE_NUMBER,
) -> Dict[str, Any]:
    user_data: Dict[str, Any] = {
        'email': email,
        'password': password,
        'name': name,
        'address': address,
        'phone_number': phone_number,
        'role': role,
    }
    if manager_id is not None:
        user_data['manager_id'] = manager_id
    response = client.post(USER_CREATE, json=user_data)
    assert_response_status(response, 201, f'Failed to create {role} user: {response.text}')
    return response.json()


def seat_categories(
    *,
    balcony_seats: int = DEFAULT_BALCONY_SEATS,
    ordinary_seats: int = DEFAULT_ORDINARY_SEATS,
    balcony_price: float = DEFAULT_BALCONY_PRICE,
    ordinary_price: float = DEFAULT_ORDINARY_PRICE,
) -> List[Dict[str, Any]]:
    return [
        {'category': 'balcony', 'total_seats': balcony_seats, 'price': balcony_price},
        {'category': 'ordinary', 'total_seats': ordinary_seats, 'price': ordinary_price},
    ]


def create_show(
    client: TestClient,
    *,
    days_ahead: int = 10,
    timings: tuple[str, ...] = (DEFAULT_TIMING,),
    **category_overrides: Any,
) -> Dict[str, Any]:
    """Create a show as the currently logged-in manager"""
    show_data = {
        'show_date': (date.today() + timedelta(days=days_ahead)).isoformat(),
        'number_of_shows': len(timings),
        'performances': [
            {'timing': timing, 'seat_categories': seat_categories(**category_overrides)}
            for timing in timings
        ],
    }
    response = client.post(SHOW_BASE, json=show_data)
    assert_response_status(response, 201, 'Failed to create show')
    return response.json()


def booking_payload(show_id: int, /, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        'show_id': show_id,
        'timing': DEFAULT_TIMING,
        'seat_type': 'ordinary',
        'seat_number': 'O-1',
        'spectator_name': 'Ada Lovelace',
        'payment_info': 'card **** 4242',
    }
    payload.update(overrides)
    return payload


def create_booking(client: TestClient, show_id: int, **overrides: Any) -> Dict[str, Any]:
    response = client.post(BOOKING_BASE, json=booking_payload(show_id, **overrides))
    assert_response_status(response, 201, 'Failed to create booking')
    return response.json()


def find_seat_category(
    show: Dict[str, Any], *, timing: str = DEFAULT_TIMING, category: str
) -> Dict[str, Any]:
    performance = next(p for p in show['performances'] if p['timing'] == timing)
    return next(c for c in performance['seat_categories'] if c['category'] == category)


def available_seats(
    client: TestClient, show_id: int, *, timing: str = DEFAULT_TIMING, category: str
) -> int:
    response = client.get(f'{SHOW_BASE}/{show_id}')
    assert_response_status(response, 200)
    return find_seat_category(response.json(), timing=timing, category=category)[
        'available_seats'
    ]
