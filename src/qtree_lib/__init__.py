# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the qtree command-line tool.

qtree translates the deprecated flat queue configuration (`mapred.queue.names`,
per-queue ACL and state properties) into a queue hierarchy, warning about the
use of the deprecated format. It provides the flat configuration store, the
queue model and its properties, the parsers building the hierarchy, and the
`qtree queues` command presenting the result.
"""

from .qtree import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "conf",
    "core",
    "hierarchy",
    "properties",
    "queues",
]
