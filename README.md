# pocketccu

A pure-Python model of a cinema camera as seen by a camera control unit:
the settings the camera reports (lens, video, status, media, metadata and
timecode), plus the lookup tables and helpers needed to interpret them.
It has no dependencies beyond the standard library.

## Installation

```
pip install pocketccu
```

To run the test suite:

```
pip install "pocketccu[test]"
pytest
```

## Modules

- `pocketccu.constants`: the Bluetooth service and characteristic UUIDs
  (`UUID_BMD_BCS` and friends), `POWER_ON` / `POWER_OFF` payloads,
  `CameraStatusFlags` and `camera_status_flags(data)`, which reads the flags
  from the first byte of a status payload (`NONE` for an empty one).
- `pocketccu.models`: the `CameraModel` enumeration, `from_value(value)`
  (raises `ValueError` for an unknown number), `is_pocket(model)`,
  `model_from_name(name)` and `model_name(model)` (both raise `KeyError` when
  there is no match).
- `pocketccu.versions`: `parse_version("0.1.0")` gives `[0, 1, 0]`;
  `compatibility_verified(major, minor, patch)` is true when the major version
  matches `MAJOR`.
- `pocketccu.lens`: `FSTOP_VALUES`, `APERTURE_NUMBERS`, `ApertureUnits`,
  `index_for_aperture_number(n)` (the index in `APERTURE_NUMBERS`, `-1` if
  absent, and the largest aperture number itself for anything above it) and
  `fstop_string(value, units)`, e.g. `fstop_string(2.8, ApertureUnits.FSTOPS)`
  gives `"f2.8"`.
- `pocketccu.video`: white balance, tint, ISO, gain, shutter and frame rate
  tables; `WhiteBalancePreset`, `white_balance_preset_index(wb, tint)`
  (`-1` when no preset matches) and `calculate_iris_av(text)`, the truncated
  aperture value log2(N²) of an f-number string.
- `pocketccu.codec`: `BasicCodec` and the frozen dataclass `CodecInfo`, with
  `describe()` for a name such as `"BRAW 5:1"` (empty for an unknown variant)
  and `is_braw_bitrate()`.
- `pocketccu.transport`: `MediaTransportMode`, `StorageMedium`,
  `TransportSlot` and `TransportInfo`, whose `to_bytes()` encodes mode, speed,
  flags and one medium byte per slot, and `active_slot_count()`.
- `pocketccu.slots`: `MediaStatus` and `MediaSlot`, with `medium_string()`,
  `status_string(upper=True)` and `status_is_error()`.
- `pocketccu.store`: `AttributeStore`, which holds named settings with
  `has(name)`, `get(name)`, `set(name, value)` and `touch()`, tracks
  `last_modified` (milliseconds from an optional `clock` callable) and
  `connected` (`set_connected()` / `set_disconnected()`). Reading a setting
  that has not been set raises `CameraAttributeError`; an unknown name raises
  `ValueError`.
- `pocketccu.media`: `MediaCamera`, adding media slots
  (`on_media_status`, `on_remaining_record_time_minutes`,
  `on_remaining_record_time_strings`, `on_transport_mode`), codec history
  (`on_codec` and the `last_known_*` attributes), `is_recording`,
  `has_record_error()`, `slot_medium_string(i)`, `slot_status_string(i)`,
  `has_active_media_slot()` and `active_media_slot()`.
- `pocketccu.camera`: `Camera`, adding model checks (`is_pocket_4k_6k()`,
  `is_pocket_4k()`, `is_pocket_6k()`, `is_ursa_mini_pro_g2()`,
  `is_ursa_mini_pro_12k()`), `on_shutter_angle`, `on_shutter_speed`,
  `on_reel_number`, `aperture_units_string()`, `lens_iris()` and
  `timecode_string()`.

## Example

```python
from pocketccu.camera import Camera

camera = Camera()
camera.set("model_name", "Pocket Cinema Camera 6K Pro")
camera.is_pocket_6k()          # True
camera.timecode_string()       # "00:00:00:00" until a timecode is set

camera.on_shutter_angle(18000)
camera.shutter_value_is_angle  # True
camera.get("shutter_angle")    # 18000
```

## What it does not do

pocketccu only models camera state and its tables. It does not scan for or
connect to cameras over Bluetooth, it does not encode, decode or validate
camera control packets, and it does not send commands. Values reach a
`Camera` only through the `on_*` methods and `set()` called by your own code.