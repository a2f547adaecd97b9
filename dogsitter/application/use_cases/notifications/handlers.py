"""Build the notification that corresponds to each kind of change."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anyio

from dogsitter.domain.entities import (
    Booking,
    BookingSnapshot,
    Message,
    NotificationDraft,
    NotificationType,
    NotificationWriteResult,
    Profile,
    Review,
)

from .booking_diff import BookingTransition, diff_booking
from .lookups import ProfileLookup, ThreadResolver
from .writer import NotificationWriter

logger = logging.getLogger(__name__)

BOOKING_REQUEST_TITLE = "New Booking Request"
BOOKING_STATUS_TITLE = "Booking Status Updated"


@dataclass
class NotificationServices:
    """Collaborators shared by the event handlers."""

    profiles: ProfileLookup
    threads: ThreadResolver
    writer: NotificationWriter


async def notify_new_message(
    services: NotificationServices, message: Message
) -> NotificationWriteResult | None:
    """Tell the other participant of the thread about ``message``.

    The message content is used verbatim as the notification body.
    """

    thread = await services.threads.get(message.thread_id)
    if thread is None:
        logger.error("Thread not found: %s", message.thread_id)
        return None

    sender = await services.profiles.get(message.sender_id)
    if sender is None:
        logger.error("Sender not found: %s", message.sender_id)
        return None

    return await services.writer.write(
        NotificationDraft(
            recipient_id=thread.counterpart_of(message.sender_id),
            type=NotificationType.MESSAGE,
            title=sender.full_name,
            body=message.content,
            data={"threadId": message.thread_id, "messageId": message.id},
        )
    )


async def _fetch_participants(
    services: NotificationServices, booking: Booking
) -> tuple[Profile | None, Profile | None]:
    profiles: dict[str, Profile | None] = {}

    async def _fetch(role: str, profile_id: str) -> None:
        profiles[role] = await services.profiles.get(profile_id)

    async with anyio.create_task_group() as task_group:
        task_group.start_soon(_fetch, "owner", booking.owner_id)
        task_group.start_soon(_fetch, "sitter", booking.sitter_id)

    return profiles.get("owner"), profiles.get("sitter")


async def notify_booking_change(
    services: NotificationServices,
    booking: Booking,
    previous: BookingSnapshot | None,
) -> NotificationWriteResult | None:
    """Notify the sitter about new bookings and the owner about status changes."""

    transition = diff_booking(booking, previous)
    if transition is BookingTransition.UNCHANGED:
        logger.debug("Booking %s changed without a status transition", booking.id)
        return None

    owner, sitter = await _fetch_participants(services, booking)
    if owner is None or sitter is None:
        logger.error(
            "Owner or sitter not found for booking %s (owner=%s, sitter=%s)",
            booking.id,
            booking.owner_id,
            booking.sitter_id,
        )
        return None

    table = booking.booking_type.table_name
    if transition is BookingTransition.CREATED:
        draft = NotificationDraft(
            recipient_id=booking.sitter_id,
            type=NotificationType.BOOKING_REQUEST,
            title=BOOKING_REQUEST_TITLE,
            body=(
                f"{owner.full_name} has requested a "
                f"{booking.booking_type.service_label} service"
            ),
            data={"bookingId": booking.id, "type": table},
        )
    else:
        draft = NotificationDraft(
            recipient_id=booking.owner_id,
            type=NotificationType.BOOKING_STATUS,
            title=BOOKING_STATUS_TITLE,
            body=f"Your booking with {sitter.full_name} is now {booking.status}",
            data={"bookingId": booking.id, "type": table, "status": booking.status},
        )
    return await services.writer.write(draft)


async def notify_new_review(
    services: NotificationServices, review: Review
) -> NotificationWriteResult | None:
    reviewer = await services.profiles.get(review.reviewer_id)
    if reviewer is None:
        logger.error("Reviewer not found: %s", review.reviewer_id)
        return None

    return await services.writer.write(
        NotificationDraft(
            recipient_id=review.reviewee_id,
            type=NotificationType.REVIEW,
            title=reviewer.full_name,
            body=f"{reviewer.full_name} has left you a review",
            data={"reviewId": review.id},
        )
    )


__all__ = [
    "NotificationServices",
    "notify_booking_change",
    "notify_new_message",
    "notify_new_review",
]
