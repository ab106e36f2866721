"""Input layout, MIDI mappings, settings and a dependency container for a hardware MIDI controller."""

__version__ = "0.1.0"