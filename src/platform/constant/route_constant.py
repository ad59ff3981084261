# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_ME = USER_BASE
USER_SALESPEOPLE = f'{USER_BASE}/salespeople'

# Show routes
SHOW_BASE = f'{API_BASE}/show'
SHOW_CREATE = SHOW_BASE
SHOW_LIST = SHOW_BASE
SHOW_GET = f'{SHOW_BASE}/{{show_id}}'

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_CREATE = BOOKING_BASE
BOOKING_MY_BOOKINGS = f'{BOOKING_BASE}/my_booking'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_REFUND_QUOTE = f'{BOOKING_BASE}/{{booking_id}}/refund_quote'

# Sales routes
SALES_BASE = f'{API_BASE}/sales'
SALES_COMMISSION = f'{SALES_BASE}/{{salesperson_id}}/commission'
