# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout qtree.

Each exception carries an associated exit code used by qtree commands
to report failures consistently.
"""

from qtree_lib.core.config import CFG


class QTreeError(Exception):
    """Common exception type for all recoverable qtree errors."""

    exit_code = CFG.exit_codes.default


class QTreeInvalidStateError(QTreeError):
    """Raised when a string does not name any known queue state."""

    pass
