from .events import (
    CHANGE_EVENT_SCHEMA_VERSION,
    BookingRecord,
    ChangeEventRequest,
    MessageRecord,
    PreviousBookingRecord,
    ReviewRecord,
)
from .notification import NotificationInbox, NotificationRead
from .payment import (
    ChargePaymentRequest,
    ChargePaymentResponse,
    PaymentMethodRead,
    PaymentMethodsRequest,
    PaymentMethodsResponse,
)

__all__ = [
    "BookingRecord",
    "CHANGE_EVENT_SCHEMA_VERSION",
    "ChangeEventRequest",
    "ChargePaymentRequest",
    "ChargePaymentResponse",
    "MessageRecord",
    "NotificationInbox",
    "NotificationRead",
    "PaymentMethodRead",
    "PaymentMethodsRequest",
    "PaymentMethodsResponse",
    "PreviousBookingRecord",
    "ReviewRecord",
]
