"""Full camera state: model checks, shutter, metadata and display values."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pocketccu.lens import ApertureUnits
from pocketccu.media import MediaCamera
from pocketccu.models import CameraModel, model_from_name

logger = logging.getLogger(__name__)

_DEFAULT_TIMECODE = "00:00:00:00"

_APERTURE_UNIT_NAMES: dict[ApertureUnits, str] = {
    ApertureUnits.FSTOPS: "Fstops",
    ApertureUnits.TSTOPS: "Tstops",
}

_POCKET_4K_6K = frozenset(
    {
        CameraModel.POCKET_CINEMA_CAMERA_4K,
        CameraModel.POCKET_CINEMA_CAMERA_6K,
        CameraModel.POCKET_CINEMA_CAMERA_6K_G2,
        CameraModel.POCKET_CINEMA_CAMERA_6K_PRO,
    }
)

_POCKET_6K = frozenset(
    {
        CameraModel.POCKET_CINEMA_CAMERA_6K,
        CameraModel.POCKET_CINEMA_CAMERA_6K_G2,
        CameraModel.POCKET_CINEMA_CAMERA_6K_PRO,
    }
)


class Camera(MediaCamera):
    """Everything known about a connected camera."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        super().__init__(clock)
        self.shutter_value_is_angle = True

    def _model(self, caller: str) -> CameraModel | None:
        if not self.has("model_name"):
            logger.error("%s - Called but do not have model name", caller)
            return None
        try:
            return model_from_name(self.get("model_name"))
        except KeyError:
            logger.error("%s - Could not map name to model", caller)
            return None

    def _model_in(self, models: frozenset[CameraModel], caller: str) -> bool:
        model = self._model(caller)
        return model is not None and model in models

    def is_pocket_4k_6k(self) -> bool:
        return self._model_in(_POCKET_4K_6K, "is_pocket_4k_6k")

    def is_pocket_4k(self) -> bool:
        return self._model_in(frozenset({CameraModel.POCKET_CINEMA_CAMERA_4K}), "is_pocket_4k")

    def is_pocket_6k(self) -> bool:
        return self._model_in(_POCKET_6K, "is_pocket_6k")

    def is_ursa_mini_pro_g2(self) -> bool:
        return self._model_in(frozenset({CameraModel.URSA_MINI_PRO_G2}), "is_ursa_mini_pro_g2")

    def is_ursa_mini_pro_12k(self) -> bool:
        return self._model_in(frozenset({CameraModel.URSA_MINI_PRO_12K}), "is_ursa_mini_pro_12k")

    def on_shutter_angle(self, shutter_angle: int) -> None:
        """Record a shutter angle (degrees x 100); the shutter is now shown as an angle."""
        self.shutter_value_is_angle = True
        self.set("shutter_angle", shutter_angle)

    def on_shutter_speed(self, shutter_speed: int) -> None:
        """Record a shutter speed (1/n s); the shutter is now shown as a speed."""
        self.shutter_value_is_angle = False
        self.set("shutter_speed", shutter_speed)

    def on_reel_number(self, reel_number: int, editable: bool) -> None:
        self.set("reel_number", reel_number)
        self.set("reel_editable", editable)

    def aperture_units_string(self) -> str:
        """Name of the reported aperture units; raise CameraAttributeError if unset."""
        units = ApertureUnits(self.get("aperture_units"))
        return _APERTURE_UNIT_NAMES[units]

    def lens_iris(self) -> str:
        """The reported lens iris text, or "" if none has been reported."""
        return self.get("lens_iris") if self.has("lens_iris") else ""

    def timecode_string(self) -> str:
        """The reported timecode, or all zeros if none has been reported."""
        return self.get("timecode") if self.has("timecode") else _DEFAULT_TIMECODE