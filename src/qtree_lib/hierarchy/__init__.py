# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Queue hierarchy and the parsers building it.

This module provides:

- `Queue`: a node of the queue hierarchy holding a name, a run state,
  per-operation access-control lists, and ordered children.

- `QueueConfigurationParser`: the base for parsers that build a hierarchy
  from a configuration source. It exposes the resulting root queue, the global
  ACL-enforcement flag, and access checks against the queue ACLs.

- `DeprecatedQueueConfigurationParser`: builds a single-level hierarchy from
  the deprecated flat `mapred.queue.*` properties and warns about their use.
"""

from .deprecated import DeprecatedQueueConfigurationParser
from .names import toFullPropertyName
from .parser import QueueConfigurationParser
from .queue import Queue

__all__ = [
    "DeprecatedQueueConfigurationParser",
    "Queue",
    "QueueConfigurationParser",
    "toFullPropertyName",
]
