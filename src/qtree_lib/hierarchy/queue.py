# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Mapping

import yaml

from qtree_lib.core.common import load_yaml_dumper
from qtree_lib.properties.acl import AccessControlList
from qtree_lib.properties.operations import QueueOperation
from qtree_lib.properties.states import QueueState

from .names import toFullPropertyName

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class Queue:
    """
    Node of the queue hierarchy.

    A queue has a name, a run state, a mapping of fully-qualified ACL
    property names to access-control lists, and an ordered list of children.
    The root of the hierarchy has an empty name and only aggregates its children.
    """

    def __init__(
        self,
        name: str = "",
        acls: Mapping[str, AccessControlList] | None = None,
        state: QueueState = QueueState.RUNNING,
    ):
        """
        Initialize the queue.

        Args:
            name (str): Name of the queue. Empty for the root.
            acls (Mapping[str, AccessControlList] | None): ACLs keyed by the
                fully-qualified property name. Copied.
            state (QueueState): Run state of the queue.
        """
        self._name = name
        self._acls: dict[str, AccessControlList] = dict(acls or {})
        self._state = state
        self._children: list[Queue] = []

    def getName(self) -> str:
        """Return the name of the queue."""
        return self._name

    def getState(self) -> QueueState:
        """Return the run state of the queue."""
        return self._state

    def getAcls(self) -> dict[str, AccessControlList]:
        """Return a copy of the ACLs keyed by the fully-qualified property name."""
        return dict(self._acls)

    def getAcl(self, operation: QueueOperation) -> AccessControlList | None:
        """
        Return the ACL guarding the given operation.

        Args:
            operation (QueueOperation): The operation to look up.

        Returns:
            AccessControlList | None: The ACL, or None if the queue has no ACL
            for the operation (e.g. the root).
        """
        return self._acls.get(toFullPropertyName(self._name, operation.aclName))

    def getChildren(self) -> list["Queue"]:
        """Return the children of the queue in insertion order."""
        return list(self._children)

    def addChild(self, child: "Queue") -> None:
        """
        Append a child queue.

        Args:
            child (Queue): The queue to attach.
        """
        self._children.append(child)

    def isRoot(self) -> bool:
        """Return True if this queue is the unnamed root of a hierarchy."""
        return self._name == ""

    def toDict(self) -> dict[str, object]:
        """
        Convert the queue and its children into a dictionary.

        The root is represented only by its children.
        """
        children = [child.toDict() for child in self._children]
        if self.isRoot():
            return {"queues": children}

        data: dict[str, object] = {
            "name": self._name,
            "state": str(self._state),
            "acls": {key: str(acl) for key, acl in self._acls.items()},
        }
        if children:
            data["children"] = children
        return data

    def toYaml(self) -> str:
        """
        Return the queue and its children in YAML format.

        Returns:
            str: YAML representation of the queue.
        """
        return yaml.dump(
            self.toDict(), default_flow_style=False, sort_keys=False, Dumper=Dumper
        )

    def __repr__(self) -> str:
        return (
            f"Queue(name={self._name!r}, state={self._state}, "
            f"children={[child.getName() for child in self._children]})"
        )
