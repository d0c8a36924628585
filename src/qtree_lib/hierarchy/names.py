# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from qtree_lib.core.config import CFG


def toFullPropertyName(queue: str, property: str) -> str:
    """
    Construct the fully-qualified name of a per-queue property.

    Args:
        queue (str): Name of the queue.
        property (str): Name of the property, e.g. `state` or `acl-submit-job`.

    Returns:
        str: The property name, e.g. `mapred.queue.default.state`.
    """
    return f"{CFG.legacy_keys.queue_prefix}.{queue}.{property}"
