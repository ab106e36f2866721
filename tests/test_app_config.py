import pytest

from midictl.app_config import (
    ApplicationConfiguration,
    ControlSettings,
    MidiSettings,
    OperationMode,
    PerformanceSettings,
    SystemSettings,
    UISettings,
)
from midictl.hardware import HardwareConfiguration
from midictl.mapping import MappingConfiguration


@pytest.fixture
def config():
    return ApplicationConfiguration()


@pytest.fixture
def recorded(config):
    names = []
    config.register_change_callback(names.append)
    return names


def test_default_values(config):
    assert config.performance_settings.performance_mode is False
    assert config.performance_settings.max_update_cycle_time_us == 30000
    assert config.performance_settings.max_input_time_us == 1000
    assert config.performance_settings.max_midi_time_us == 2000
    assert config.ui_settings.refresh_rate_hz == 60
    assert config.ui_settings.refresh_period_ms == 16
    assert config.ui_settings.enable_full_ui is True
    assert config.control_settings.encoder_rate_limit_ms == 20
    assert config.midi_settings == MidiSettings(0, 0, 127)
    assert config.system_settings.serial_baud_rate == 115200
    assert config.system_settings.max_command_history == 10


def test_holds_hardware_and_mapping(config):
    assert isinstance(config.hardware_configuration, HardwareConfiguration)
    assert isinstance(config.mapping_configuration, MappingConfiguration)
    assert len(config.hardware_configuration.all_inputs()) == 12


def test_setting_groups_notify(config, recorded):
    config.performance_settings = PerformanceSettings(performance_mode=True)
    config.ui_settings = UISettings(show_debug_info=True)
    config.control_settings = ControlSettings(encoder_sensitivity=2.0)
    config.midi_settings = MidiSettings(default_channel=3)
    config.system_settings = SystemSettings(max_command_history=5)
    assert recorded == [
        "performance_settings",
        "ui_settings",
        "control_settings",
        "midi_settings",
        "system_settings",
    ]
    assert config.midi_settings.default_channel == 3
    assert config.encoder_sensitivity == 2.0


def test_encoder_sensitivity_round_trip(config, recorded):
    config.encoder_sensitivity = 0.5
    assert config.encoder_sensitivity == 0.5
    assert config.control_settings.encoder_sensitivity == 0.5
    assert config.control_settings.encoder_rate_limit_ms == 20
    assert recorded == ["encoder_sensitivity"]


@pytest.mark.parametrize(
    "mode, perf, debug",
    [
        (OperationMode.NORMAL, False, False),
        (OperationMode.PERFORMANCE, True, False),
        (OperationMode.DEBUG, False, True),
    ],
)
def test_operation_modes(config, recorded, mode, perf, debug):
    config.ui_settings = UISettings(enable_full_ui=False)
    config.set_operation_mode(mode)
    assert config.performance_settings.performance_mode is perf
    assert config.ui_settings.show_debug_info is debug
    assert config.ui_settings.enable_full_ui is True
    assert recorded[-1] == "operation_mode"


def test_unknown_mode_rejected(config):
    with pytest.raises(ValueError):
        config.set_operation_mode("turbo")


def test_reset_to_defaults(config, recorded):
    config.encoder_sensitivity = 3.0
    config.set_operation_mode(OperationMode.DEBUG)
    config.reset_to_defaults()
    fresh = ApplicationConfiguration()
    assert config.control_settings == fresh.control_settings
    assert config.ui_settings == fresh.ui_settings
    assert config.performance_settings == fresh.performance_settings
    assert recorded[-1] == "all_settings"


def test_unregister_callback(config):
    first, second = [], []
    config.register_change_callback(first.append)
    config.register_change_callback(second.append)
    config.unregister_change_callback(first.append)
    config.encoder_sensitivity = 1.2
    assert first == []
    assert second == ["encoder_sensitivity"]


def test_unregister_unknown_is_harmless(config, recorded):
    config.unregister_change_callback(lambda name: None)
    config.reset_to_defaults()
    assert recorded == ["all_settings"]


def test_register_non_callable(config):
    with pytest.raises(TypeError):
        config.register_change_callback(42)


def test_settings_are_immutable(config):
    with pytest.raises(AttributeError):
        config.midi_settings.default_channel = 5
    assert config.midi_settings.default_channel == 0