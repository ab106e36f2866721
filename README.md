# midictl

This is the configuration layer of a hardware MIDI controller built from
buttons and rotary encoders. It describes the physical inputs and maps them
to MIDI messages. It also holds the application settings and wires components
together through a small dependency container.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `midictl.container`: `DependencyContainer` stores objects under a key, which
  is usually a class.
  - `register()` stores an instance under a key.
  - `register_implementation()` does the same, but first checks that the
    instance is an instance of the interface class. It raises `TypeError` if not.
  - `register_factory()` stores a callable. The first `resolve()` of that key
    calls it and caches the result.
  - `resolve()` returns the stored object, or `None` if nothing is stored.
  - `has()`, `remove()` and `clear()` manage what is stored.
- `midictl.navigation`: `NavigationConfigService` records which control ids
  drive the user interface rather than sending MIDI. It provides
  `set_control_for_navigation()` and `is_navigation_control()`.
- `midictl.global_settings`: `get_global_settings()` returns the shared
  `GlobalSettings` instance. It holds `encoder_sensitivity`, which defaults
  to 1.0.
- `midictl.serial_buffer`: `SerialBuffer` keeps the last `max_lines` lines
  (100 by default) in a ring.
  - `println()` adds a line.
  - `lines()` returns the lines, oldest first.
  - `flush()` writes them to the given stream, or to standard output.
  - `clear()` empties the buffer.
  - `truncate_line()` cuts a line to a limit (80 by default) and ends it with
    `...`.
- `midictl.mapping`: `MappingConfiguration` holds the built-in table of
  `InputMapping` entries, built from a control id, a `MappingType` and a
  `MidiControl`. It also holds the `NavigationControl` ids 79, 51 and 52.
  - `midi_mapping_for()` looks up a control's MIDI target.
  - `mapped_controls()` and `navigation_controls()` return the tables.
- `midictl.hardware`: `HardwareConfiguration` describes every button and
  encoder as an `InputConfig`. Each one holds a `ButtonConfig` or an
  `EncoderConfig` together with its `GpioPin` settings.
  - `all_inputs()` returns every input.
  - `inputs_by_type()`, `input_by_id()` and `inputs_by_group()` select inputs.
  - `groups()` and `count_by_type()` summarise the inputs.
  - `is_valid()` checks every input.
- `midictl.app_config`: `ApplicationConfiguration` exposes the hardware and
  mapping tables as `hardware_configuration` and `mapping_configuration`.
  - Its five settings groups are properties: `performance_settings`,
    `ui_settings`, `control_settings`, `midi_settings` and `system_settings`.
  - `encoder_sensitivity` is a shortcut into the control settings.
  - Assigning any of these properties calls every callback registered with
    `register_change_callback()`, passing the name of what changed.
  - `set_operation_mode()` applies an `OperationMode`: `NORMAL`,
    `PERFORMANCE` or `DEBUG`.
  - `reset_to_defaults()` restores every settings group to its defaults.
- `midictl.debug`: `DebugLogger` writes tagged debug lines to a sink and
  filters them by level. Tags include `[ERROR]`, `[MIDI]`, `[ENC]` and
  `[SCHED]`.
  - Lines are cut to 80 characters.
  - Each method returns the line it wrote, or `None` if the line was filtered
    out.
  - Its `DebugSettings` come from `settings_for_profile()`, with one preset
    for each `DebugProfile`.
  - `DebugLevel` and `TaskPriority` list the verbosity levels and the
    scheduler priorities.

## Example

```python
from midictl.container import DependencyContainer
from midictl.mapping import MappingConfiguration, MappingType
from midictl.hardware import HardwareConfiguration, InputType

container = DependencyContainer()
container.register(MappingConfiguration, MappingConfiguration())

mapping = container.resolve(MappingConfiguration)
control = mapping.midi_mapping_for(71, MappingType.ENCODER)
print(control.channel, control.control)        # 0 1

hardware = HardwareConfiguration()
print(hardware.count_by_type(InputType.ENCODER))
print(hardware.groups())
```

## What it does not do

The package only describes and configures the controller. It does not:

- read buttons or encoders;
- send or receive MIDI;
- drive a display;
- save settings to storage.

It has no command-line program.