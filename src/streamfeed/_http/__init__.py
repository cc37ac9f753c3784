"""HTTP plumbing shared by the sync and async clients."""

from .transport import (
    RESERVED_OPTIONS,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    check_options,
)

__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "RESERVED_OPTIONS",
    "check_options",
]
