import pytest

from midictl.mapping import (
    InputMapping,
    MappingConfiguration,
    MappingType,
    MidiControl,
    NavigationControl,
)


@pytest.fixture
def config():
    return MappingConfiguration()


@pytest.mark.parametrize(
    "control_id, cc",
    [(71, 1), (72, 2), (78, 8), (80, 10), (79, 9)],
)
def test_encoder_cc_mappings(config, control_id, cc):
    mapping = config.midi_mapping_for(control_id, MappingType.ENCODER)
    assert mapping == MidiControl(channel=0, control=cc, is_relative=True)


@pytest.mark.parametrize(
    "control_id, note",
    [(1071, 36), (1078, 43), (51, 44), (52, 45), (79, 46)],
)
def test_button_note_mappings(config, control_id, note):
    mapping = config.midi_mapping_for(control_id, MappingType.BUTTON)
    assert mapping is not None
    assert mapping.control == note
    assert mapping.channel == 0


def test_default_type_is_encoder(config):
    assert config.midi_mapping_for(71) == config.midi_mapping_for(71, MappingType.ENCODER)


def test_same_id_distinguished_by_type(config):
    encoder = config.midi_mapping_for(79, MappingType.ENCODER)
    button = config.midi_mapping_for(79, MappingType.BUTTON)
    assert encoder.control == 9
    assert button.control == 46


def test_unmapped_returns_none(config):
    assert config.midi_mapping_for(9999) is None
    assert config.midi_mapping_for(1071, MappingType.ENCODER) is None
    assert config.midi_mapping_for(71, MappingType.BUTTON) is None


def test_every_mapped_control_is_resolvable(config):
    for mapping in config.mapped_controls():
        assert isinstance(mapping, InputMapping)
        assert config.midi_mapping_for(mapping.control_id, mapping.mapping_type) == (
            mapping.midi_mapping
        )


def test_mapping_keys_are_unique(config):
    keys = [(m.control_id, m.mapping_type) for m in config.mapped_controls()]
    assert len(keys) == len(set(keys))


def test_all_mappings_on_first_channel_and_in_midi_range(config):
    for mapping in config.mapped_controls():
        assert mapping.midi_mapping.channel == 0
        assert 0 <= mapping.midi_mapping.control <= 127


def test_first_mapping_is_first_encoder(config):
    first = config.mapped_controls()[0]
    assert first == InputMapping(71, MappingType.ENCODER, MidiControl(0, 1, True))


def test_navigation_controls(config):
    assert config.navigation_controls() == (
        NavigationControl(79),
        NavigationControl(51),
        NavigationControl(52),
    )


@pytest.mark.parametrize("control_id", [79, 51, 52])
def test_is_navigation_control_true(config, control_id):
    assert config.is_navigation_control(control_id) is True


@pytest.mark.parametrize("control_id", [71, 80, 1071, 0])
def test_is_navigation_control_false(config, control_id):
    assert config.is_navigation_control(control_id) is False


def test_navigation_controls_agree_with_predicate(config):
    for control in config.navigation_controls():
        assert config.is_navigation_control(control.id)


def test_instances_are_independent_but_equal(config):
    other = MappingConfiguration()
    assert other.mapped_controls() == config.mapped_controls()
    assert other.navigation_controls() == config.navigation_controls()


def test_mapping_records_are_immutable(config):
    mapping = config.mapped_controls()[0]
    with pytest.raises(AttributeError):
        mapping.control_id = 5
    assert config.mapped_controls()[0].control_id == 71
    assert config.midi_mapping_for(71, MappingType.ENCODER).control == 1