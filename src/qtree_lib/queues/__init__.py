# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Presentation of the queue hierarchy built from a legacy configuration.

This module defines the `queues` command and `QueuesPresenter`, a formatter that
turns the built hierarchy into a Rich panel showing the state and ACLs of each
queue and whether it accepts jobs from the user, or dumps it as YAML.
"""

from .cli import queues
from .presenter import QueuesPresenter

__all__ = [
    "QueuesPresenter",
    "queues",
]
