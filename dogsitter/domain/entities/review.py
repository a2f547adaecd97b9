"""Domain entity representing a review left after a booking."""

from dataclasses import dataclass


@dataclass
class Review:
    id: str
    reviewer_id: str
    reviewee_id: str


__all__ = ["Review"]
