"""Transport protocols usable by an RTSP session."""

from __future__ import annotations

import enum


class Transport(enum.IntEnum):
    """An RTSP transport protocol.

    Values outside the standard set are accepted and render as ``unknown``.
    """

    UDP = 0
    UDP_MULTICAST = 1
    TCP = 2

    @classmethod
    def _missing_(cls, value: object) -> Transport | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        member = int.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return member

    def __str__(self) -> str:
        return _LABELS.get(int(self), "unknown")


_LABELS = {
    Transport.UDP.value: "UDP",
    Transport.UDP_MULTICAST.value: "UDP-multicast",
    Transport.TCP.value: "TCP",
}