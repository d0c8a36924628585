# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for qtree.

This module collects the foundational helpers used across the qtree codebase:
configuration, error types, structured logging, CLI help formatting, and
general utilities.
"""
