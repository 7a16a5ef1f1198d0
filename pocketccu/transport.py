"""Media transport state: mode, speed, flags and storage slots."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from pocketccu.constants import UNKNOWN_ENUM_VALUE


class MediaTransportMode(enum.IntEnum):
    PREVIEW = 0
    PLAY = 1
    RECORD = 2


class MediaTransportFlag(enum.IntFlag):
    NONE = 0
    LOOP = 1 << 0
    PLAY_ALL = 1 << 1
    DISK1_ACTIVE = 1 << 5
    DISK2_ACTIVE = 1 << 6
    TIMELAPSE_RECORDING = 1 << 7


SLOT_ACTIVE_MASKS: tuple[MediaTransportFlag, ...] = (
    MediaTransportFlag.DISK1_ACTIVE,
    MediaTransportFlag.DISK2_ACTIVE,
)


class StorageMedium(enum.IntEnum):
    CFAST_CARD = 0
    SD_CARD = 1
    SSD_RECORDER = 2
    USB = 3

    @property
    def label(self) -> str:
        return _MEDIUM_LABELS.get(self, UNKNOWN_ENUM_VALUE)


_MEDIUM_LABELS: dict[StorageMedium, str] = {
    StorageMedium.CFAST_CARD: "CFast Card",
    StorageMedium.SD_CARD: "SD Card",
    StorageMedium.SSD_RECORDER: "SSD Recorder",
    StorageMedium.USB: "USB",
}


@dataclass
class TransportSlot:
    active: bool = False
    medium: StorageMedium = StorageMedium.CFAST_CARD


@dataclass
class TransportInfo:
    """Transport state as sent to and reported by the camera."""

    mode: MediaTransportMode = MediaTransportMode.PREVIEW
    speed: int = 0
    loop: bool = False
    play_all: bool = False
    timelapse_recording: bool = False
    slots: list[TransportSlot] = field(default_factory=list)

    def _flags(self) -> MediaTransportFlag:
        flags = MediaTransportFlag.NONE
        if self.loop:
            flags |= MediaTransportFlag.LOOP
        if self.play_all:
            flags |= MediaTransportFlag.PLAY_ALL
        if self.timelapse_recording:
            flags |= MediaTransportFlag.TIMELAPSE_RECORDING
        for index, slot in enumerate(self.slots):
            if not slot.active:
                continue
            if index >= len(SLOT_ACTIVE_MASKS):
                raise ValueError(f"slot {index} cannot be marked active; only {len(SLOT_ACTIVE_MASKS)} supported")
            flags |= SLOT_ACTIVE_MASKS[index]
        return flags

    def to_bytes(self) -> bytes:
        """Encode as mode, signed speed, flags, then one medium byte per slot."""
        if not -128 <= self.speed <= 127:
            raise ValueError(f"speed out of range: {self.speed}")
        payload = [int(self.mode), self.speed & 0xFF, int(self._flags())]
        payload.extend(int(slot.medium) for slot in self.slots)
        return bytes(payload)

    def active_slot_count(self) -> int:
        return sum(1 for slot in self.slots if slot.active)