"""Bluetooth service identifiers, camera status flags and shared constants."""

from __future__ import annotations

import enum
from collections.abc import Sequence

UUID_BMD_BCS = "291D567A-6D75-11E6-8B77-86F30CA893D3"
UUID_BMD_BCS_OUTGOING_CAMERA_CONTROL = "5DD3465F-1AEE-4299-8493-D2ECA2F8E1BB"
UUID_BMD_BCS_INCOMING_CAMERA_CONTROL = "B864E140-76A0-416A-BF30-5876504537D9"
UUID_BMD_BCS_TIMECODE = "6D8F2110-86F1-41BF-9AFB-451D87E976C8"
UUID_BMD_BCS_DEVICE_NAME = "FFAC0C52-C9FB-41A0-B063-CC76282EB89C"
UUID_BMD_BCS_PROTOCOL_VERSION = "8F1FD018-B508-456F-8F82-3D392BEE2706"
UUID_BMD_BCS_CAMERA_STATUS = "7FE8691D-95DC-4FC5-8ABD-CA74339B51B9"

# Returned when an enum value has no matching text.
UNKNOWN_ENUM_VALUE = "[Unknown]"

# RGB565 colour (140, 0, 0).
DARK_RED = 0x8800

POWER_OFF = bytes([0])
POWER_ON = bytes([1])


class CameraStatusFlags(enum.IntFlag):
    """Bits carried in the first byte of the camera status characteristic."""

    NONE = 0x00
    CAMERA_POWER = 0x01
    CAMERA_READY = 0x02


def camera_status_flags(data: Sequence[int] | bytes) -> CameraStatusFlags:
    """Return the status flags held in the first byte of ``data``, or none if empty."""
    if len(data) == 0:
        return CameraStatusFlags.NONE
    return CameraStatusFlags(data[0])