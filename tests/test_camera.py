import pytest

from pocketccu.camera import Camera
from pocketccu.lens import ApertureUnits
from pocketccu.store import CameraAttributeError


class _Clock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def camera(clock):
    return Camera(clock=clock)


def test_model_checks_without_model_name_are_false(camera):
    assert not camera.is_pocket_4k_6k()
    assert not camera.is_pocket_4k()
    assert not camera.is_pocket_6k()
    assert not camera.is_ursa_mini_pro_g2()
    assert not camera.is_ursa_mini_pro_12k()


def test_model_checks_with_unknown_name_are_false(camera):
    camera.set("model_name", "Not A Camera")
    assert not camera.is_pocket_4k_6k()
    assert not camera.is_ursa_mini_pro_12k()


def test_pocket_4k(camera):
    camera.set("model_name", "Pocket Cinema Camera 4K")
    assert camera.is_pocket_4k()
    assert camera.is_pocket_4k_6k()
    assert not camera.is_pocket_6k()
    assert not camera.is_ursa_mini_pro_g2()


@pytest.mark.parametrize(
    "name",
    ["Pocket Cinema Camera 6K", "Pocket Cinema Camera 6K G2", "Pocket Cinema Camera 6K Pro"],
)
def test_pocket_6k_variants(camera, name):
    camera.set("model_name", name)
    assert camera.is_pocket_6k()
    assert camera.is_pocket_4k_6k()
    assert not camera.is_pocket_4k()


def test_original_pocket_is_not_4k_6k(camera):
    camera.set("model_name", "Pocket Cinema Camera")
    assert not camera.is_pocket_4k_6k()


def test_ursa_models(camera):
    camera.set("model_name", "URSA Mini Pro G2")
    assert camera.is_ursa_mini_pro_g2()
    assert not camera.is_ursa_mini_pro_12k()
    camera.set("model_name", "URSA Mini Pro 12K")
    assert camera.is_ursa_mini_pro_12k()
    assert not camera.is_ursa_mini_pro_g2()


def test_shutter_angle_and_speed_switch_mode(camera):
    assert camera.shutter_value_is_angle is True
    camera.on_shutter_speed(50)
    assert camera.shutter_value_is_angle is False
    assert camera.get("shutter_speed") == 50
    camera.on_shutter_angle(18000)
    assert camera.shutter_value_is_angle is True
    assert camera.get("shutter_angle") == 18000
    assert camera.get("shutter_speed") == 50


def test_shutter_angle_marks_modified(camera, clock):
    clock.now = 1234
    camera.on_shutter_angle(9000)
    assert camera.last_modified == 1234


def test_reel_number(camera):
    assert not camera.has("reel_number")
    camera.on_reel_number(7, True)
    assert camera.get("reel_number") == 7
    assert camera.get("reel_editable") is True
    camera.on_reel_number(8, False)
    assert camera.get("reel_number") == 8
    assert camera.get("reel_editable") is False


def test_aperture_units_string_unset_raises(camera):
    with pytest.raises(CameraAttributeError, match="Aperture Units not assigned to."):
        camera.aperture_units_string()


def test_aperture_units_string(camera):
    camera.set("aperture_units", ApertureUnits.FSTOPS)
    fstops = camera.aperture_units_string()
    camera.set("aperture_units", ApertureUnits.TSTOPS)
    tstops = camera.aperture_units_string()
    assert fstops == "Fstops"
    assert tstops == "Tstops"


def test_lens_iris_default_and_set(camera):
    assert camera.lens_iris() == ""
    camera.set("lens_iris", "f2.8")
    assert camera.lens_iris() == "f2.8"


def test_timecode_default_and_set(camera):
    assert camera.timecode_string() == "00:00:00:00"
    camera.set("timecode", "01:02:03:04")
    assert camera.timecode_string() == "01:02:03:04"


def test_unset_getter_raises(camera):
    with pytest.raises(CameraAttributeError):
        camera.get("shutter_angle")