"""Exceptions raised by the fars helpers."""

from __future__ import annotations


class InvalidStateError(ValueError):
    """The requested STATE number does not occur in the loaded year."""

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")
