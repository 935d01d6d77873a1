"""도메인 예외."""

from safebed.domain.exceptions.base import DomainError
from safebed.domain.exceptions.location import InvalidLocationRowError

__all__ = [
    "DomainError",
    "InvalidLocationRowError",
]
