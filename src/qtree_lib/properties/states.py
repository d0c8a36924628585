# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from typing import Self

from qtree_lib.core.config import CFG
from qtree_lib.core.error import QTreeInvalidStateError


class QueueState(Enum):
    """
    Run state of a queue, governing whether it accepts new jobs.
    """

    RUNNING = "running"
    STOPPED = "stopped"

    def __str__(self) -> str:
        """
        Return the canonical name of the state.

        Returns:
            str: The name of the state in lowercase.
        """
        return self.value

    @property
    def stateName(self) -> str:
        """Canonical name of the state as written in configuration files."""
        return self.value

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding QueueState enum variant.

        Args:
            s (str): Name of the state (case-insensitive, surrounding whitespace ignored).

        Returns:
            QueueState: Corresponding enum variant.

        Raises:
            QTreeInvalidStateError: If the string does not name any queue state.
        """
        normalized = s.strip().lower()
        for state in cls:
            if state.value == normalized:
                return state

        raise QTreeInvalidStateError(f"Unknown queue state '{s}'.")

    @property
    def color(self) -> str:
        """
        Return the display color associated with this QueueState.

        Returns:
            str: A string representing the color for presentation purposes.
        """
        return {
            QueueState.RUNNING: CFG.state_colors.running,
            QueueState.STOPPED: CFG.state_colors.stopped,
        }[self]
