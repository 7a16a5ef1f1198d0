"""State of one media slot as reported by the camera."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pocketccu.transport import StorageMedium


class MediaStatus(enum.IntEnum):
    NONE = 0
    READY = 1
    MOUNT_ERROR = 2
    RECORD_ERROR = 3


_STATUS_TEXT: dict[MediaStatus, str] = {
    MediaStatus.NONE: "None",
    MediaStatus.READY: "Ready",
    MediaStatus.MOUNT_ERROR: "Mount Error",
    MediaStatus.RECORD_ERROR: "Record Error",
}

_UNKNOWN_STATUS = "UNKNOWN STATUS"


@dataclass
class MediaSlot:
    active: bool = False
    medium: StorageMedium = StorageMedium.CFAST_CARD
    status: MediaStatus = MediaStatus.NONE
    remaining_record_time_minutes: int = 0
    remaining_record_time_string: str = ""

    def medium_string(self) -> str:
        return StorageMedium(self.medium).label

    def status_string(self, upper: bool = True) -> str:
        """Describe the status, upper case by default."""
        try:
            text = _STATUS_TEXT[MediaStatus(self.status)]
        except ValueError:
            return _UNKNOWN_STATUS
        return text.upper() if upper else text

    def status_is_error(self) -> bool:
        return self.status in (MediaStatus.MOUNT_ERROR, MediaStatus.RECORD_ERROR)