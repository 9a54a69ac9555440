"""
Telraam library for working with the Telraam API
"""

__version__ = "0.1.0"

# Version of the Telraam API this library supports
VER = "v1"

from telraam.clients.telraam_api import TelraamClient  # noqa: E402
from telraam.errors import (  # noqa: E402
    ConfigurationError,
    DecodeError,
    NonSuccessResponse,
    TelraamError,
    TransportError,
)

__all__ = [
    "VER",
    "TelraamClient",
    "TelraamError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "NonSuccessResponse",
]
