"""Mapping of physical controls to MIDI messages and navigation roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MappingType(Enum):
    """Which part of a physical control a mapping applies to."""

    ENCODER = 0
    BUTTON = 1


@dataclass(frozen=True)
class MidiControl:
    """The MIDI target of a mapping: channel (0-15), CC or note number."""

    channel: int
    control: int
    is_relative: bool = False


@dataclass(frozen=True)
class InputMapping:
    """Binds a control id and mapping type to a MIDI target."""

    control_id: int
    mapping_type: MappingType
    midi_mapping: MidiControl


@dataclass(frozen=True)
class NavigationControl:
    """A control dedicated to user-interface navigation."""

    id: int


# Rotary encoders send relative CCs on channel 1 (0 here).
_ENCODER_CCS: tuple[tuple[int, int], ...] = (
    (71, 1),
    (72, 2),
    (73, 3),
    (74, 4),
    (75, 5),
    (76, 6),
    (77, 7),
    (78, 8),
    (80, 10),  # optical encoder
)

# Encoder push buttons and standalone buttons send notes.
_BUTTON_NOTES: tuple[tuple[int, int], ...] = (
    (1071, 36),
    (1072, 37),
    (1073, 38),
    (1074, 39),
    (1075, 40),
    (1076, 41),
    (1077, 42),
    (1078, 43),
    (51, 44),  # menu button
    (52, 45),  # ok button
)

_NAVIGATION_IDS: tuple[int, ...] = (
    79,  # main navigation encoder
    51,  # menu button
    52,  # ok button
)


def _default_mappings() -> list[InputMapping]:
    mappings = [
        InputMapping(control_id, MappingType.ENCODER, MidiControl(0, cc, True))
        for control_id, cc in _ENCODER_CCS
    ]
    mappings.extend(
        InputMapping(control_id, MappingType.BUTTON, MidiControl(0, note, True))
        for control_id, note in _BUTTON_NOTES
    )
    # The navigation encoder also has MIDI mappings for when it is not navigating.
    mappings.append(InputMapping(79, MappingType.ENCODER, MidiControl(0, 9, True)))
    mappings.append(InputMapping(79, MappingType.BUTTON, MidiControl(0, 46, True)))
    return mappings


class MappingConfiguration:
    """The built-in table of MIDI mappings and navigation controls."""

    def __init__(self) -> None:
        self._mappings: tuple[InputMapping, ...] = tuple(_default_mappings())
        self._navigation: tuple[NavigationControl, ...] = tuple(
            NavigationControl(control_id) for control_id in _NAVIGATION_IDS
        )
        # A later mapping for the same (id, type) replaces an earlier one.
        self._index: dict[tuple[int, MappingType], MidiControl] = {
            (mapping.control_id, mapping.mapping_type): mapping.midi_mapping
            for mapping in self._mappings
        }
        self._navigation_ids = frozenset(control.id for control in self._navigation)

    def midi_mapping_for(
        self, control_id: int, mapping_type: MappingType = MappingType.ENCODER
    ) -> MidiControl | None:
        """Return the MIDI target for a control and type, or None if unmapped."""
        return self._index.get((control_id, mapping_type))

    def is_navigation_control(self, control_id: int) -> bool:
        """Whether the control is dedicated to navigation."""
        return control_id in self._navigation_ids

    def mapped_controls(self) -> tuple[InputMapping, ...]:
        """Every configured MIDI mapping, in definition order."""
        return self._mappings

    def navigation_controls(self) -> tuple[NavigationControl, ...]:
        """Every navigation control, in definition order."""
        return self._navigation