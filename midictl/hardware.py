"""Hardware layout of the controller's buttons and encoders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PinMode(Enum):
    """Electrical mode of a GPIO input pin."""

    INPUT = 0
    PULLUP = 1
    PULLDOWN = 2


class ButtonMode(Enum):
    """How a button reports its state."""

    MOMENTARY = 0
    TOGGLE = 1


class InputType(Enum):
    """Kind of physical input."""

    BUTTON = 0
    ENCODER = 1


@dataclass(frozen=True)
class GpioPin:
    """A GPIO pin number and its mode."""

    pin: int
    mode: PinMode = PinMode.PULLUP


@dataclass(frozen=True)
class ButtonConfig:
    """Electrical and behavioural settings of a button."""

    id: int
    gpio: GpioPin
    active_low: bool = True
    mode: ButtonMode = ButtonMode.MOMENTARY
    debounce_ms: int = 50
    long_press_ms: int = 800
    enable_long_press: bool = False


@dataclass(frozen=True)
class EncoderConfig:
    """Electrical and behavioural settings of a rotary encoder."""

    id: int
    pin_a: GpioPin
    pin_b: GpioPin
    ppr: int = 24
    button_config: ButtonConfig | None = None
    sensitivity: float = 1.0
    enable_acceleration: bool = True
    steps_per_detent: int = 4
    acceleration_threshold: int = 100


@dataclass(frozen=True)
class InputConfig:
    """A physical input together with its descriptive metadata."""

    id: int
    name: str
    type: InputType
    label: str
    config: ButtonConfig | EncoderConfig
    group: str
    description: str = ""
    enabled: bool = True
    display_order: int = 0

    def is_valid(self) -> bool:
        """Whether the input is named and its settings match its type and id."""
        expected = ButtonConfig if self.type is InputType.BUTTON else EncoderConfig
        return (
            bool(self.name)
            and isinstance(self.config, expected)
            and self.config.id == self.id
        )


def _button_input(
    input_id: int, name: str, label: str, config: ButtonConfig, group: str = "Control"
) -> InputConfig:
    return InputConfig(
        id=input_id,
        name=name,
        type=InputType.BUTTON,
        label=label,
        config=config,
        group=group,
        description=f"Bouton {label}",
        enabled=True,
        display_order=(input_id - 50) & 0xFF,
    )


def _encoder_input(
    input_id: int, name: str, label: str, config: EncoderConfig, group: str = "MIDI"
) -> InputConfig:
    return InputConfig(
        id=input_id,
        name=name,
        type=InputType.ENCODER,
        label=label,
        config=config,
        group=group,
        description=f"Encodeur {label}",
        enabled=True,
        display_order=(input_id - 70) & 0xFF,
    )


# (encoder id, pin A, pin B, push-button pin) for the eight MIDI encoders.
_MIDI_ENCODERS: tuple[tuple[int, int, int, int], ...] = (
    (71, 22, 23, 21),
    (72, 19, 20, 18),
    (73, 16, 17, 15),
    (74, 13, 14, 41),
    (75, 39, 40, 38),
    (76, 36, 37, 35),
    (77, 33, 34, 30),
    (78, 28, 29, 27),
)


def _default_inputs() -> list[InputConfig]:
    inputs = [
        _button_input(
            51,
            "menu_button",
            "Menu",
            ButtonConfig(
                id=51,
                gpio=GpioPin(32, PinMode.PULLUP),
                active_low=True,
                mode=ButtonMode.TOGGLE,
                debounce_ms=50,
                long_press_ms=1000,
                enable_long_press=True,
            ),
            "Navigation",
        ),
        _button_input(
            52,
            "ok_button",
            "OK",
            ButtonConfig(
                id=52,
                gpio=GpioPin(31, PinMode.PULLUP),
                active_low=True,
                mode=ButtonMode.MOMENTARY,
                debounce_ms=50,
            ),
            "Navigation",
        ),
    ]

    for number, (enc_id, pin_a, pin_b, button_pin) in enumerate(_MIDI_ENCODERS, start=1):
        config = EncoderConfig(
            id=enc_id,
            pin_a=GpioPin(pin_a, PinMode.PULLUP),
            pin_b=GpioPin(pin_b, PinMode.PULLUP),
            ppr=24,
            button_config=ButtonConfig(
                id=1000 + enc_id,
                gpio=GpioPin(button_pin, PinMode.PULLUP),
                active_low=True,
                mode=ButtonMode.MOMENTARY,
                debounce_ms=30,
            ),
            enable_acceleration=True,
            steps_per_detent=4,
        )
        inputs.append(_encoder_input(enc_id, f"encoder_{number}", f"Enc {number}", config, "MIDI"))

    inputs.append(
        _encoder_input(
            79,
            "nav_encoder",
            "Navigation",
            EncoderConfig(
                id=79,
                pin_a=GpioPin(9, PinMode.PULLUP),
                pin_b=GpioPin(10, PinMode.PULLUP),
                ppr=96,
                button_config=ButtonConfig(
                    id=1079,
                    gpio=GpioPin(8, PinMode.PULLUP),
                    active_low=True,
                    mode=ButtonMode.MOMENTARY,
                    debounce_ms=30,
                    long_press_ms=800,
                    enable_long_press=True,
                ),
                sensitivity=1.5,
                enable_acceleration=True,
                steps_per_detent=4,
                acceleration_threshold=80,
            ),
            "Navigation",
        )
    )
    inputs.append(
        _encoder_input(
            80,
            "optical_encoder",
            "Precision",
            EncoderConfig(
                id=80,
                pin_a=GpioPin(11, PinMode.PULLUP),
                pin_b=GpioPin(12, PinMode.PULLUP),
                ppr=600,
                sensitivity=0.1,
                enable_acceleration=False,
                steps_per_detent=1,
            ),
            "Precision",
        )
    )
    return inputs


class HardwareConfiguration:
    """The built-in table of every button and encoder on the controller."""

    def __init__(self) -> None:
        self._inputs: tuple[InputConfig, ...] = tuple(_default_inputs())

    def all_inputs(self) -> tuple[InputConfig, ...]:
        """Every input, in definition order."""
        return self._inputs

    def inputs_by_type(self, input_type: InputType) -> list[InputConfig]:
        """The inputs of the given type, in definition order."""
        return [item for item in self._inputs if item.type is input_type]

    def input_by_id(self, input_id: int) -> InputConfig | None:
        """The input with the given id, or None."""
        return next((item for item in self._inputs if item.id == input_id), None)

    def inputs_by_group(self, group: str) -> list[InputConfig]:
        """The inputs belonging to ``group``, in definition order."""
        return [item for item in self._inputs if item.group == group]

    def groups(self) -> list[str]:
        """The distinct group names, sorted."""
        return sorted({item.group for item in self._inputs})

    def count_by_type(self, input_type: InputType) -> int:
        """How many inputs are of the given type."""
        return sum(1 for item in self._inputs if item.type is input_type)

    def is_valid(self) -> bool:
        """Whether every input is valid."""
        return all(item.is_valid() for item in self._inputs)