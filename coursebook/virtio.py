"""The wire layout of a virtio block device request header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_LAYOUT = struct.Struct("<IIQ")


class RequestType(IntEnum):
    """Kind of block request."""

    IN = 0
    OUT = 1
    FLUSH = 4


@dataclass
class VirtioBlockRequest:
    """A block request header: type, reserved word and sector."""

    request_type: RequestType = RequestType.IN
    reserved: int = 0
    sector: int = 0

    def as_bytes(self) -> bytes:
        """Return the 16-byte little-endian encoding of the header."""
        try:
            return _LAYOUT.pack(RequestType(self.request_type), self.reserved, self.sector)
        except struct.error as error:
            raise ValueError(f"field out of range: {error}") from error

    @classmethod
    def from_bytes(cls, data: bytes) -> VirtioBlockRequest:
        """Decode a header produced by :meth:`as_bytes`."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"expected {_LAYOUT.size} bytes, got {len(data)}")
        request_type, reserved, sector = _LAYOUT.unpack(data)
        return cls(RequestType(request_type), reserved, sector)