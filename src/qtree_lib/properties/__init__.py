# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Properties attached to qtree queues.

This module collects the value types that describe a queue: its run state,
the operations it supports, and the access-control lists guarding them.
"""
