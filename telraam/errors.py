"""
Error types raised by the Telraam client
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from telraam.models.response import Status


class TelraamError(Exception):
    """Base class for every error raised by this package"""


class ConfigurationError(TelraamError):
    """Raised when the client cannot be configured, e.g. a malformed API token"""


class TransportError(TelraamError):
    """Raised when the HTTP round trip to the Telraam API fails"""


class DecodeError(TelraamError):
    """Raised when a response body is not JSON or does not match the expected schema"""


class NonSuccessResponse(TelraamError):
    """The API answered with a status_code above 299 inside a well-formed body"""

    def __init__(self, status: "Status"):
        self.status = status
        super().__init__(f"status_code:{status.status_code}:{status.message}")

    @property
    def status_code(self) -> int:
        return self.status.status_code

    @property
    def message(self) -> str:
        return self.status.message
