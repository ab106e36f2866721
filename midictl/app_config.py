"""Central application configuration: settings grouped by category, with change notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from midictl.hardware import HardwareConfiguration
from midictl.mapping import MappingConfiguration

# Performance
PERFORMANCE_MODE = False
MAX_UPDATE_TIME_US = 30000
MAX_INPUT_TIME_US = 1000
MAX_MIDI_TIME_US = 2000
MAX_UI_TIME_US = 2000

# User interface
UI_REFRESH_RATE_HZ = 60
UI_REFRESH_PERIOD_MS = 1000 // UI_REFRESH_RATE_HZ
SHOW_DEBUG_INFO = False
ENABLE_FULL_UI = True

# Controls
DEFAULT_ENCODER_SENSITIVITY = 1.0
ENCODER_RATE_LIMIT_MS = 20
DUPLICATE_CHECK_MS = 10

# MIDI
DEFAULT_MIDI_CHANNEL = 0  # MIDI channel 1 (0-15)
CC_VALUE_MIN = 0
CC_VALUE_MAX = 127

# System
SERIAL_BAUD_RATE = 115200
MAX_COMMAND_HISTORY = 10

ChangeCallback = Callable[[str], None]


class OperationMode(Enum):
    """Predefined operating modes."""

    NORMAL = "normal"
    PERFORMANCE = "performance"
    DEBUG = "debug"


@dataclass(frozen=True)
class PerformanceSettings:
    """Timing budgets and the performance-mode switch."""

    performance_mode: bool = PERFORMANCE_MODE
    max_update_cycle_time_us: int = MAX_UPDATE_TIME_US
    max_input_time_us: int = MAX_INPUT_TIME_US
    max_midi_time_us: int = MAX_MIDI_TIME_US
    max_ui_time_us: int = MAX_UI_TIME_US


@dataclass(frozen=True)
class UISettings:
    """Display refresh and user-interface options."""

    refresh_rate_hz: int = UI_REFRESH_RATE_HZ
    refresh_period_ms: int = UI_REFRESH_PERIOD_MS
    show_debug_info: bool = SHOW_DEBUG_INFO
    enable_full_ui: bool = ENABLE_FULL_UI


@dataclass(frozen=True)
class ControlSettings:
    """Encoder sensitivity and rate limiting."""

    encoder_sensitivity: float = DEFAULT_ENCODER_SENSITIVITY
    encoder_rate_limit_ms: int = ENCODER_RATE_LIMIT_MS


@dataclass(frozen=True)
class MidiSettings:
    """Default MIDI channel and CC value range."""

    default_channel: int = DEFAULT_MIDI_CHANNEL
    cc_value_min: int = CC_VALUE_MIN
    cc_value_max: int = CC_VALUE_MAX


@dataclass(frozen=True)
class SystemSettings:
    """Serial speed and command-history length."""

    serial_baud_rate: int = SERIAL_BAUD_RATE
    max_command_history: int = MAX_COMMAND_HISTORY


_MODE_FLAGS: dict[OperationMode, tuple[bool, bool]] = {
    # mode: (performance_mode, show_debug_info)
    OperationMode.NORMAL: (False, False),
    OperationMode.PERFORMANCE: (True, False),
    OperationMode.DEBUG: (False, True),
}


class ApplicationConfiguration:
    """Single entry point for the hardware, mapping and global settings.

    Assigning any settings group notifies the registered callbacks with the
    name of what changed.
    """

    def __init__(self) -> None:
        self.hardware_configuration = HardwareConfiguration()
        self.mapping_configuration = MappingConfiguration()
        self._callbacks: list[ChangeCallback] = []
        self._load_defaults()

    def _load_defaults(self) -> None:
        self._performance = PerformanceSettings()
        self._ui = UISettings()
        self._control = ControlSettings()
        self._midi = MidiSettings()
        self._system = SystemSettings()

    @property
    def performance_settings(self) -> PerformanceSettings:
        return self._performance

    @performance_settings.setter
    def performance_settings(self, settings: PerformanceSettings) -> None:
        self._performance = settings
        self._notify("performance_settings")

    @property
    def ui_settings(self) -> UISettings:
        return self._ui

    @ui_settings.setter
    def ui_settings(self, settings: UISettings) -> None:
        self._ui = settings
        self._notify("ui_settings")

    @property
    def control_settings(self) -> ControlSettings:
        return self._control

    @control_settings.setter
    def control_settings(self, settings: ControlSettings) -> None:
        self._control = settings
        self._notify("control_settings")

    @property
    def midi_settings(self) -> MidiSettings:
        return self._midi

    @midi_settings.setter
    def midi_settings(self, settings: MidiSettings) -> None:
        self._midi = settings
        self._notify("midi_settings")

    @property
    def system_settings(self) -> SystemSettings:
        return self._system

    @system_settings.setter
    def system_settings(self, settings: SystemSettings) -> None:
        self._system = settings
        self._notify("system_settings")

    @property
    def encoder_sensitivity(self) -> float:
        return self._control.encoder_sensitivity

    @encoder_sensitivity.setter
    def encoder_sensitivity(self, value: float) -> None:
        self._control = replace(self._control, encoder_sensitivity=value)
        self._notify("encoder_sensitivity")

    def set_operation_mode(self, mode: OperationMode) -> None:
        """Apply the performance and debug flags that belong to ``mode``."""
        try:
            performance_mode, show_debug = _MODE_FLAGS[mode]
        except KeyError:
            raise ValueError(f"unknown operation mode: {mode!r}") from None
        self._performance = replace(self._performance, performance_mode=performance_mode)
        self._ui = replace(self._ui, show_debug_info=show_debug, enable_full_ui=True)
        self._notify("operation_mode")

    def reset_to_defaults(self) -> None:
        """Restore every settings group to its default values."""
        self._load_defaults()
        self._notify("all_settings")

    def register_change_callback(self, callback: ChangeCallback) -> None:
        """Call ``callback(name)`` whenever a setting changes."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callbacks.append(callback)

    def unregister_change_callback(self, callback: ChangeCallback) -> None:
        """Stop notifying ``callback``; does nothing if it was not registered."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify(self, name: str) -> None:
        for callback in list(self._callbacks):
            callback(name)