"""Effect-chain sidebar rows: hit testing, bypass toggling and callbacks."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from enum import Enum

BYPASS_WIDTH = 30
CONTROL_WIDTH = 20
CONTROLS_WIDTH = 3 * CONTROL_WIDTH


class RowAction(Enum):
    """What a click on a sidebar row does."""

    BYPASS = "bypass"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    REMOVE = "remove"
    SELECT = "select"


def hit_test(x: float, width: float) -> RowAction:
    """Return the action for a click at x in a row of the given width."""
    if x < BYPASS_WIDTH:
        return RowAction.BYPASS
    right_start = width - CONTROLS_WIDTH
    if x >= right_start:
        offset = x - right_start
        if offset < CONTROL_WIDTH:
            return RowAction.MOVE_UP
        if offset < 2 * CONTROL_WIDTH:
            return RowAction.MOVE_DOWN
        return RowAction.REMOVE
    return RowAction.SELECT


SlotCallback = Callable[[int], None]


class SidebarRow:
    """One effect slot in the sidebar, bound to the shared parameter values."""

    def __init__(
        self,
        params: MutableMapping[str, float],
        slot_index: int,
        type_id: str,
        name: str,
        row_number: int,
        on_remove: SlotCallback | None = None,
        on_move_up: SlotCallback | None = None,
        on_move_down: SlotCallback | None = None,
        on_select: SlotCallback | None = None,
    ) -> None:
        self.params = params
        self.slot_index = slot_index
        self.type_id = type_id
        self.name = name
        self.row_number = row_number
        self.on_remove = on_remove
        self.on_move_up = on_move_up
        self.on_move_down = on_move_down
        self.on_select = on_select
        self.selected = False
        self.bypassed = False
        self._read_bypass()

    @property
    def bypass_key(self) -> str:
        return f"slot{self.slot_index}.bypass"

    def _read_bypass(self) -> None:
        value = self.params.get(self.bypass_key)
        if value is not None:
            self.bypassed = value > 0.5

    def click(self, x: float, width: float) -> RowAction:
        """Handle a click at x; return the action it resolved to.

        Move and remove callbacks receive the slot index; the select
        callback receives the row number.
        """
        action = hit_test(x, width)
        if action is RowAction.BYPASS:
            self.toggle_bypass()
        elif action is RowAction.MOVE_UP:
            if self.on_move_up:
                self.on_move_up(self.slot_index)
        elif action is RowAction.MOVE_DOWN:
            if self.on_move_down:
                self.on_move_down(self.slot_index)
        elif action is RowAction.REMOVE:
            if self.on_remove:
                self.on_remove(self.slot_index)
        elif self.on_select:
            self.on_select(self.row_number)
        return action

    def toggle_bypass(self) -> bool:
        """Flip the slot's bypass parameter; return whether it existed."""
        key = self.bypass_key
        if key not in self.params:
            return False
        self.params[key] = 0.0 if self.params[key] > 0.5 else 1.0
        self.bypassed = not self.bypassed
        return True

    def update(self, selected: bool) -> None:
        """Set the selection state and re-read the bypass parameter."""
        self.selected = selected
        self._read_bypass()