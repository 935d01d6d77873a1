"""Application Exceptions."""

from safebed.application.common.exceptions.base import ApplicationError
from safebed.application.common.exceptions.store import LocationStoreError
from safebed.application.common.exceptions.validation import MissingCoordinatesError

__all__ = [
    "ApplicationError",
    "LocationStoreError",
    "MissingCoordinatesError",
]
