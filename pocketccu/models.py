"""Camera models and their display names."""

from __future__ import annotations

import enum


class CameraModel(enum.IntEnum):
    """Camera models as numbered by the camera control protocol."""

    UNKNOWN = 0
    CINEMA_CAMERA = 1
    POCKET_CINEMA_CAMERA = 2
    PRODUCTION_CAMERA_4K = 3
    STUDIO_CAMERA = 4
    STUDIO_CAMERA_4K = 5
    URSA = 6
    MICRO_CINEMA_CAMERA = 7
    MICRO_STUDIO_CAMERA = 8
    URSA_MINI = 9
    URSA_MINI_PRO = 10
    URSA_BROADCAST = 11
    URSA_MINI_PRO_G2 = 12
    POCKET_CINEMA_CAMERA_4K = 13
    POCKET_CINEMA_CAMERA_6K = 14
    POCKET_CINEMA_CAMERA_6K_PRO = 15
    URSA_MINI_PRO_12K = 16
    URSA_BROADCAST_G2 = 17
    STUDIO_CAMERA_4K_PLUS = 18
    STUDIO_CAMERA_4K_PRO = 19
    POCKET_CINEMA_CAMERA_6K_G2 = 20
    STUDIO_CAMERA_4K_EXTREME = 21


NUMBER_OF_CAMERA_MODELS = 21

_MODEL_TO_NAME: dict[CameraModel, str] = {
    CameraModel.CINEMA_CAMERA: "Cinema Camera",
    CameraModel.POCKET_CINEMA_CAMERA: "Pocket Cinema Camera",
    CameraModel.MICRO_CINEMA_CAMERA: "Micro Cinema Camera",
    CameraModel.MICRO_STUDIO_CAMERA: "Micro Studio Camera",
    CameraModel.POCKET_CINEMA_CAMERA_4K: "Pocket Cinema Camera 4K",
    CameraModel.POCKET_CINEMA_CAMERA_6K: "Pocket Cinema Camera 6K",
    CameraModel.POCKET_CINEMA_CAMERA_6K_G2: "Pocket Cinema Camera 6K G2",
    CameraModel.POCKET_CINEMA_CAMERA_6K_PRO: "Pocket Cinema Camera 6K Pro",
    CameraModel.PRODUCTION_CAMERA_4K: "Production Camera 4K",
    CameraModel.STUDIO_CAMERA: "Studio Camera",
    CameraModel.STUDIO_CAMERA_4K: "Studio Camera 4K",
    CameraModel.STUDIO_CAMERA_4K_EXTREME: "Studio Camera 4K Extreme",
    CameraModel.STUDIO_CAMERA_4K_PLUS: "Studio Camera 4K Plus",
    CameraModel.STUDIO_CAMERA_4K_PRO: "Studio Camera 4K Pro",
    CameraModel.URSA: "URSA",
    CameraModel.URSA_BROADCAST: "URSA Broadcast",
    CameraModel.URSA_BROADCAST_G2: "URSA Broadcast G2",
    CameraModel.URSA_MINI: "URSA Mini",
    CameraModel.URSA_MINI_PRO: "URSA Mini Pro",
    CameraModel.URSA_MINI_PRO_12K: "URSA Mini Pro 12K",
    CameraModel.URSA_MINI_PRO_G2: "URSA Mini Pro G2",
}

_NAME_TO_MODEL: dict[str, CameraModel] = {name: model for model, name in _MODEL_TO_NAME.items()}

_POCKET_MODELS = frozenset(
    {
        CameraModel.POCKET_CINEMA_CAMERA,
        CameraModel.POCKET_CINEMA_CAMERA_4K,
        CameraModel.POCKET_CINEMA_CAMERA_6K,
        CameraModel.POCKET_CINEMA_CAMERA_6K_G2,
        CameraModel.POCKET_CINEMA_CAMERA_6K_PRO,
    }
)


def from_value(value: int) -> CameraModel:
    """Return the model with protocol number ``value``; raise ValueError if there is none."""
    return CameraModel(value)


def is_pocket(model: CameraModel) -> bool:
    """Whether ``model`` is one of the Pocket Cinema Cameras."""
    return model in _POCKET_MODELS


def model_from_name(name: str) -> CameraModel:
    """Return the model the camera reports as ``name``; raise KeyError if unknown."""
    try:
        return _NAME_TO_MODEL[name]
    except KeyError:
        raise KeyError(f"unknown camera model name: {name!r}") from None


def model_name(model: CameraModel) -> str:
    """Return the display name of ``model``; raise KeyError if it has none."""
    try:
        return _MODEL_TO_NAME[CameraModel(model)]
    except KeyError:
        raise KeyError(f"no name for camera model: {model!r}") from None