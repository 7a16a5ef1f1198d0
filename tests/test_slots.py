import pytest

from pocketccu.slots import MediaSlot, MediaStatus
from pocketccu.transport import StorageMedium


@pytest.mark.parametrize(
    "status, upper, lower",
    [
        (MediaStatus.NONE, "NONE", "None"),
        (MediaStatus.READY, "READY", "Ready"),
        (MediaStatus.MOUNT_ERROR, "MOUNT ERROR", "Mount Error"),
        (MediaStatus.RECORD_ERROR, "RECORD ERROR", "Record Error"),
    ],
)
def test_status_strings(status, upper, lower):
    slot = MediaSlot(status=status)
    assert slot.status_string() == upper
    assert slot.status_string(upper=False) == lower


def test_unknown_status_string():
    slot = MediaSlot(status=9)
    assert slot.status_string() == "UNKNOWN STATUS"
    assert slot.status_string(upper=False) == "UNKNOWN STATUS"


def test_status_is_error():
    assert MediaSlot(status=MediaStatus.MOUNT_ERROR).status_is_error() is True
    assert MediaSlot(status=MediaStatus.RECORD_ERROR).status_is_error() is True
    assert MediaSlot(status=MediaStatus.READY).status_is_error() is False
    assert MediaSlot(status=MediaStatus.NONE).status_is_error() is False


def test_medium_string_matches_medium_label():
    for medium in StorageMedium:
        assert MediaSlot(medium=medium).medium_string() == medium.label


def test_defaults():
    slot = MediaSlot()
    assert slot.active is False
    assert slot.medium is StorageMedium.CFAST_CARD
    assert slot.remaining_record_time_string == ""