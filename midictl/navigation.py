"""Tracks which controls drive UI navigation rather than MIDI output."""

from __future__ import annotations


class NavigationConfigService:
    """A set of control ids reserved for navigation."""

    def __init__(self) -> None:
        self._navigation_controls: set[int] = set()

    def set_control_for_navigation(self, control_id: int, is_navigation: bool = True) -> None:
        """Mark a control as used for navigation, or return it to MIDI use."""
        if is_navigation:
            self._navigation_controls.add(control_id)
        else:
            self._navigation_controls.discard(control_id)

    def is_navigation_control(self, control_id: int) -> bool:
        """Whether the control is reserved for navigation."""
        return control_id in self._navigation_controls