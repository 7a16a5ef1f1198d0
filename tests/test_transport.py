import pytest

from pocketccu.constants import UNKNOWN_ENUM_VALUE
from pocketccu.transport import (
    MediaTransportFlag,
    MediaTransportMode,
    StorageMedium,
    TransportInfo,
    TransportSlot,
)


def test_empty_transport_encodes_three_bytes():
    data = TransportInfo(mode=MediaTransportMode.PLAY).to_bytes()
    assert len(data) == 3
    assert data[0] == MediaTransportMode.PLAY
    assert data[1] == 0
    assert data[2] == MediaTransportFlag.NONE


def test_negative_speed_is_twos_complement():
    data = TransportInfo(speed=-1).to_bytes()
    assert data[1] == 0xFF


def test_speed_out_of_range_raises():
    with pytest.raises(ValueError):
        TransportInfo(speed=200).to_bytes()


def test_flags_are_combined():
    info = TransportInfo(loop=True, play_all=True, timelapse_recording=True)
    flags = MediaTransportFlag(info.to_bytes()[2])
    assert MediaTransportFlag.LOOP in flags
    assert MediaTransportFlag.PLAY_ALL in flags
    assert MediaTransportFlag.TIMELAPSE_RECORDING in flags
    assert MediaTransportFlag.DISK1_ACTIVE not in flags


def test_active_slots_set_disk_flags_and_mediums_follow():
    info = TransportInfo(
        mode=MediaTransportMode.RECORD,
        slots=[
            TransportSlot(active=False, medium=StorageMedium.SD_CARD),
            TransportSlot(active=True, medium=StorageMedium.USB),
        ],
    )
    data = info.to_bytes()
    flags = MediaTransportFlag(data[2])
    assert MediaTransportFlag.DISK2_ACTIVE in flags
    assert MediaTransportFlag.DISK1_ACTIVE not in flags
    assert list(data[3:]) == [StorageMedium.SD_CARD, StorageMedium.USB]


def test_third_active_slot_cannot_be_encoded():
    info = TransportInfo(slots=[TransportSlot(), TransportSlot(), TransportSlot(active=True)])
    with pytest.raises(ValueError):
        info.to_bytes()


def test_active_slot_count():
    info = TransportInfo(slots=[TransportSlot(active=True), TransportSlot(), TransportSlot(active=True)])
    assert info.active_slot_count() == 2
    assert TransportInfo().active_slot_count() == 0


def test_slot_defaults():
    slot = TransportSlot()
    assert slot.active is False
    assert slot.medium is StorageMedium.CFAST_CARD


def test_every_medium_encodes_and_has_a_known_label():
    labels = []
    for medium in StorageMedium:
        data = TransportInfo(slots=[TransportSlot(medium=medium)]).to_bytes()
        assert StorageMedium(data[3]) is medium
        labels.append(medium.label)
    assert len(set(labels)) == len(labels)
    assert UNKNOWN_ENUM_VALUE not in labels