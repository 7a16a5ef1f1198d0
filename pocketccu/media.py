"""Media slots, codec and transport state reported by the camera."""

from __future__ import annotations

import copy
import dataclasses
import logging
from collections.abc import Callable, Iterable

from pocketccu.codec import (
    BRAW_5_1,
    BRAW_Q5,
    PRORES_HQ,
    BasicCodec,
    CodecInfo,
)
from pocketccu.slots import MediaSlot, MediaStatus
from pocketccu.store import AttributeStore, CameraAttributeError
from pocketccu.transport import MediaTransportMode, TransportInfo

logger = logging.getLogger(__name__)


class MediaCamera(AttributeStore):
    """Camera state that adds media slots, codec history and recording state."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        super().__init__(clock)
        self._media_slots: list[MediaSlot] = []
        self._active_media_slot_index = -1
        self.is_recording = False
        # Last known settings of each kind, so switching between them restores them.
        self.last_known_braw_is_bitrate = False
        self.last_known_braw_bitrate = CodecInfo(BasicCodec.BRAW, BRAW_5_1)
        self.last_known_braw_quality = CodecInfo(BasicCodec.BRAW, BRAW_Q5)
        self.last_known_prores = CodecInfo(BasicCodec.PRORES, PRORES_HQ)

    @property
    def media_slots(self) -> list[MediaSlot]:
        """A copy of the known media slots."""
        return [dataclasses.replace(slot) for slot in self._media_slots]

    def _slot(self, index: int) -> MediaSlot:
        """Return the slot at ``index``, creating any missing slots up to it."""
        while len(self._media_slots) <= index:
            self._media_slots.append(MediaSlot())
        return self._media_slots[index]

    def _existing_slot(self, index: int) -> MediaSlot:
        if not 0 <= index < len(self._media_slots):
            raise IndexError("Invalid Media Slot index.")
        return self._media_slots[index]

    def on_media_status(self, statuses: Iterable[MediaStatus]) -> None:
        for index, status in enumerate(statuses):
            self._slot(index).status = status
        self.touch()

    def on_remaining_record_time_minutes(self, minutes: Iterable[int]) -> None:
        for index, value in enumerate(minutes):
            self._slot(index).remaining_record_time_minutes = value
        self.touch()

    def on_remaining_record_time_strings(self, strings: Iterable[str]) -> None:
        for index, value in enumerate(strings):
            self._slot(index).remaining_record_time_string = value
        self.touch()

    def on_codec(self, codec: CodecInfo) -> None:
        if codec.basic_codec == BasicCodec.BRAW:
            if codec.is_braw_bitrate():
                self.last_known_braw_bitrate = codec
                self.last_known_braw_is_bitrate = True
            else:
                self.last_known_braw_quality = codec
                self.last_known_braw_is_bitrate = False
        elif codec.basic_codec == BasicCodec.PRORES:
            self.last_known_prores = codec
        self.set("codec", codec)

    def on_transport_mode(self, transport: TransportInfo) -> None:
        transport = copy.deepcopy(transport)
        self.set("transport_mode", transport)

        for index, transport_slot in enumerate(transport.slots):
            slot = self._slot(index)
            slot.active = transport_slot.active
            slot.medium = transport_slot.medium
            if slot.active:
                self._active_media_slot_index = index

        recording = transport.mode == MediaTransportMode.RECORD
        changed = recording != self.is_recording
        self.is_recording = recording
        self.touch()
        if changed:
            logger.info(">>Recording:%s", "Yes" if recording else "No")

    def has_record_error(self) -> bool:
        return any(slot.status == MediaStatus.RECORD_ERROR for slot in self._media_slots)

    def slot_medium_string(self, index: int) -> str:
        return self._existing_slot(index).medium_string()

    def slot_status_string(self, index: int) -> str:
        return self._existing_slot(index).status_string(upper=False)

    def has_active_media_slot(self) -> bool:
        return self._active_media_slot_index != -1

    def active_media_slot(self) -> MediaSlot:
        """A copy of the active slot; raise CameraAttributeError if none is known."""
        index = self._active_media_slot_index
        if not 0 <= index < len(self._media_slots):
            raise CameraAttributeError(
                "Active Media Slot index not set or media slots not populated."
            )
        return dataclasses.replace(self._media_slots[index])