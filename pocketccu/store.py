"""Camera settings that may or may not have been reported yet."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class CameraAttributeError(RuntimeError):
    """Raised when a setting is read before the camera has reported it."""


@dataclass(frozen=True)
class _Attribute:
    label: str
    marks_modified: bool = True
    logged: bool = False


_ATTRIBUTES: dict[str, _Attribute] = {
    # Lens
    "has_lens": _Attribute("Has Lens", marks_modified=False, logged=True),
    "aperture_units": _Attribute("Aperture Units"),
    "aperture_fstop_string": _Attribute("Aperture F-Stop String", logged=True),
    "aperture_normalised": _Attribute("Aperture Normalised", logged=True),
    "focal_length_mm": _Attribute("Focal Length MM", logged=True),
    "image_stabilisation": _Attribute("Image Stabilisation", logged=True),
    # Video
    "sensor_gain_iso": _Attribute("Sensor Gain ISO", logged=True),
    "white_balance": _Attribute("White Balance", logged=True),
    "tint": _Attribute("Tint", logged=True),
    "shutter_speed_ms": _Attribute("Shutter Speed (ms)"),
    "recording_format": _Attribute("Recording Format", logged=True),
    "auto_exposure_mode": _Attribute("Auto Exposure Mode"),
    "shutter_angle": _Attribute("Shutter Angle", logged=True),
    "shutter_speed": _Attribute("Shutter Speed", logged=True),
    "sensor_gain_db": _Attribute("Sensor Gain DB", logged=True),
    "sensor_gain_iso_value": _Attribute("Sensor Gain ISO Value", logged=True),
    "selected_lut": _Attribute("Selected LUT"),
    "selected_lut_enabled": _Attribute("Selected LUT Enabled"),
    # Status; the battery is reported often and does not count as a change.
    "battery": _Attribute("Battery status", marks_modified=False),
    "model_name": _Attribute("Model Name", logged=True),
    "is_pocket": _Attribute("Is Pocket", logged=True),
    # Media
    "codec": _Attribute("Codec", logged=True),
    "transport_mode": _Attribute("Transport mode"),
    # Metadata
    "reel_number": _Attribute("Reel Number"),
    "reel_editable": _Attribute("Reel Editable"),
    "scene_name": _Attribute("Scene Name"),
    "scene_tag": _Attribute("Scene Tag"),
    "location_type": _Attribute("Location Type"),
    "day_or_night": _Attribute("Day or Night"),
    "take_tag": _Attribute("Take Tag"),
    "take_number": _Attribute("Take Number"),
    "good_take": _Attribute("Good Take"),
    "camera_id": _Attribute("Camera Id"),
    "camera_operator": _Attribute("Camera Operator"),
    "director": _Attribute("Director"),
    "project_name": _Attribute("Project Name"),
    "slate_type": _Attribute("Slate Type"),
    "slate_name": _Attribute("Slate Name"),
    "lens_focal_length": _Attribute("Lens Focal Length", logged=True),
    "lens_distance": _Attribute("Lens Distance", logged=True),
    "lens_type": _Attribute("Lens Type", logged=True),
    "lens_iris": _Attribute("Lens Iris", logged=True),
    # Display
    "timecode_source": _Attribute("Timecode Source"),
    "timecode": _Attribute("Timecode"),
}


def _millis() -> int:
    return int(time.monotonic() * 1000)


class AttributeStore:
    """Holds the camera's reported settings and when they last changed."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock if clock is not None else _millis
        self._values: dict[str, Any] = {}
        self._connected = False
        self._last_modified = self._clock()

    @staticmethod
    def _attribute(name: str) -> _Attribute:
        try:
            return _ATTRIBUTES[name]
        except KeyError:
            raise ValueError(f"unknown camera attribute: {name!r}") from None

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def last_modified(self) -> int:
        """Clock reading, in milliseconds, of the last change."""
        return self._last_modified

    def has(self, name: str) -> bool:
        """Whether the camera has reported ``name``."""
        self._attribute(name)
        return name in self._values

    def get(self, name: str) -> Any:
        """Return the reported value of ``name``; raise CameraAttributeError if unset."""
        attribute = self._attribute(name)
        try:
            return self._values[name]
        except KeyError:
            raise CameraAttributeError(f"{attribute.label} not assigned to.") from None

    def set(self, name: str, value: Any) -> None:
        """Record a value reported by the camera."""
        attribute = self._attribute(name)
        self._values[name] = value
        if attribute.marks_modified:
            self.touch()
        if attribute.logged:
            logger.info(">>%s:%s", attribute.label, value)

    def touch(self) -> None:
        """Mark the settings as changed now."""
        self._last_modified = self._clock()

    def set_connected(self) -> None:
        self._connected = True

    def set_disconnected(self) -> None:
        self._connected = False