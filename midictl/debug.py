"""Debug levels, build profiles, scheduler priorities and a prefixed debug logger."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable

from midictl.serial_buffer import DEFAULT_LINE_LIMIT, truncate_line

Sink = Callable[[str], None]

# Task scheduler tuning
TASK_SCHEDULER_STATS_INTERVAL = 500  # cycles between statistics reports
DEFAULT_CPU_BUDGET_MICROS = 5000
INITIAL_TASK_COUNT = 8

# Time budgets per subsystem, in microseconds
MAX_INPUT_TIME_US = 1000
MAX_MIDI_TIME_US = 2000
MAX_UI_TIME_US = 16000

# Minimum UI task period (about 60 Hz)
UI_MIN_PERIOD_MS = 16


class DebugLevel(IntEnum):
    """Verbosity of debug output; higher values include the lower ones."""

    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


class DebugProfile(Enum):
    """Build profile selecting a preset of debug settings."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    VERBOSE = "verbose"
    DEFAULT = "default"


class TaskPriority(IntEnum):
    """Predefined scheduler priorities; lower values run first."""

    CRITICAL = 0
    HIGH = 1
    NORMAL = 5
    LOW = 10
    BACKGROUND = 20


# Level at which each component's messages are emitted.
EVENT_BUS_LEVEL = DebugLevel.INFO
INPUT_LEVEL = DebugLevel.INFO
MIDI_LEVEL = DebugLevel.INFO
ENCODER_LEVEL = DebugLevel.INFO
BUTTONS_LEVEL = DebugLevel.INFO
UI_LEVEL = DebugLevel.INFO


@dataclass(frozen=True)
class DebugSettings:
    """Which debug output is enabled and how verbose it is.

    ``raw_controls``: 0 off, 1 light control tracing, 2 detailed.
    ``task_scheduler_level``: 0 off, 1 basic statistics, 2 detailed.
    """

    enabled: bool = True
    level: DebugLevel = DebugLevel.INFO
    raw_controls: int = 0
    event_bus_enabled: bool = False
    task_scheduler_level: int = 1
    scheduler_level: DebugLevel = DebugLevel.INFO


_PROFILES: dict[DebugProfile, DebugSettings] = {
    DebugProfile.PRODUCTION: DebugSettings(
        enabled=False,
        level=DebugLevel.ERROR,
        raw_controls=0,
        event_bus_enabled=False,
        task_scheduler_level=0,
        scheduler_level=DebugLevel.NONE,
    ),
    DebugProfile.DEVELOPMENT: DebugSettings(
        enabled=True,
        level=DebugLevel.INFO,
        raw_controls=1,
        event_bus_enabled=True,
        task_scheduler_level=1,
        scheduler_level=DebugLevel.INFO,
    ),
    DebugProfile.VERBOSE: DebugSettings(
        enabled=True,
        level=DebugLevel.DEBUG,
        raw_controls=2,
        event_bus_enabled=True,
        task_scheduler_level=2,
        scheduler_level=DebugLevel.DEBUG,
    ),
    DebugProfile.DEFAULT: DebugSettings(),
}


def settings_for_profile(profile: DebugProfile) -> DebugSettings:
    """Return the debug settings preset for ``profile``."""
    try:
        return _PROFILES[profile]
    except KeyError:
        raise ValueError(f"unknown debug profile: {profile!r}") from None


def format_debug_message(message: str) -> str:
    """Limit a debug line to 80 characters, ending with '...' when cut."""
    return truncate_line(message, DEFAULT_LINE_LIMIT)


def _stdout_sink(line: str) -> None:
    sys.stdout.write(line + "\n")


class DebugLogger:
    """Emits prefixed, level-filtered debug lines to a sink.

    Each method returns the line it emitted, or None when the message was
    filtered out by the settings.
    """

    def __init__(self, settings: DebugSettings | None = None, sink: Sink | None = None) -> None:
        self.settings = settings if settings is not None else DebugSettings()
        self._sink = sink if sink is not None else _stdout_sink

    def log(self, level: DebugLevel, fmt: str, *args: object) -> str | None:
        """Emit ``fmt % args`` if debugging is on and ``level`` passes the filter."""
        if not self.settings.enabled or self.settings.level < level:
            return None
        message = fmt % args if args else fmt
        line = format_debug_message(message)
        self._sink(line)
        return line

    def error(self, fmt: str, *args: object) -> str | None:
        return self.log(DebugLevel.ERROR, "[ERROR] " + fmt, *args)

    def event_bus(self, fmt: str, *args: object) -> str | None:
        if not self.settings.event_bus_enabled:
            return None
        return self.log(EVENT_BUS_LEVEL, "[EB] " + fmt, *args)

    def _control(self, minimum: int, level: DebugLevel, prefix: str, fmt: str,
                 args: tuple[object, ...]) -> str | None:
        if self.settings.raw_controls < minimum:
            return None
        return self.log(level, prefix + fmt, *args)

    def input(self, fmt: str, *args: object) -> str | None:
        return self._control(1, INPUT_LEVEL, "[INP] ", fmt, args)

    def encoder(self, fmt: str, *args: object) -> str | None:
        return self._control(1, ENCODER_LEVEL, "[ENC] ", fmt, args)

    def button(self, fmt: str, *args: object) -> str | None:
        return self._control(1, BUTTONS_LEVEL, "[BTN] ", fmt, args)

    def input_detail(self, fmt: str, *args: object) -> str | None:
        return self._control(2, INPUT_LEVEL, "[INP+] ", fmt, args)

    def encoder_detail(self, fmt: str, *args: object) -> str | None:
        return self._control(2, ENCODER_LEVEL, "[ENC+] ", fmt, args)

    def button_detail(self, fmt: str, *args: object) -> str | None:
        return self._control(2, BUTTONS_LEVEL, "[BTN+] ", fmt, args)

    def midi(self, fmt: str, *args: object) -> str | None:
        return self.log(MIDI_LEVEL, "[MIDI] " + fmt, *args)

    def ui(self, fmt: str, *args: object) -> str | None:
        return self.log(UI_LEVEL, "[UI] " + fmt, *args)

    def scheduler(self, fmt: str, *args: object) -> str | None:
        if self.settings.task_scheduler_level < 1:
            return None
        return self.log(self.settings.scheduler_level, "[SCHED] " + fmt, *args)

    def scheduler_verbose(self, fmt: str, *args: object) -> str | None:
        if self.settings.task_scheduler_level < 2:
            return None
        return self.log(self.settings.scheduler_level, "[SCHED-DETAIL] " + fmt, *args)