# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Flat key/value configuration store.

`Configuration` holds a read-only snapshot of string properties, as found in
Hadoop-style `*-site.xml` files or flat YAML mappings, and provides typed
accessors with defaults for unset keys.
"""

from .configuration import Configuration

__all__ = [
    "Configuration",
]
