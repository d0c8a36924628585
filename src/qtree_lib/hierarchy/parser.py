# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable

from qtree_lib.core.logger import get_logger
from qtree_lib.properties.operations import QueueOperation

from .queue import Queue

logger = get_logger(__name__)


class QueueConfigurationParser:
    """
    Base class for parsers building a queue hierarchy from a configuration source.

    Subclasses populate `root` and the ACL-enforcement flag in their constructor.
    A `root` of None means that the source did not contribute any queues.
    """

    def __init__(self):
        self.root: Queue | None = None
        self.acls_enabled: bool = False

    def getRoot(self) -> Queue | None:
        """Return the root of the constructed hierarchy, or None if nothing was built."""
        return self.root

    def isAclsEnabled(self) -> bool:
        """Return True if ACL checks are enforced for all queues."""
        return self.acls_enabled

    def setAclsEnabled(self, acls_enabled: bool) -> None:
        self.acls_enabled = acls_enabled

    def getQueue(self, name: str) -> Queue | None:
        """
        Find a top-level queue by its name.

        Args:
            name (str): Name of the queue.

        Returns:
            Queue | None: The queue, or None if no such queue exists.
        """
        if self.root is None:
            return None

        for queue in self.root.getChildren():
            if queue.getName() == name:
                return queue

        return None

    def hasAccess(
        self,
        queue_name: str,
        operation: QueueOperation,
        user: str,
        groups: Iterable[str] = (),
        job_owner: str | None = None,
    ) -> bool:
        """
        Check whether a user may perform an operation on a queue.

        If ACLs are not enforced, everyone is allowed. Otherwise, the owner of
        the job is allowed for operations permitting it and everyone else is
        checked against the ACL of the queue.

        Args:
            queue_name (str): Name of the queue.
            operation (QueueOperation): The operation to perform.
            user (str): Name of the user.
            groups (Iterable[str]): Groups the user belongs to.
            job_owner (str | None): Owner of the job the operation targets, if any.

        Returns:
            bool: True if the operation is allowed, False otherwise.
        """
        if not self.acls_enabled:
            return True

        queue = self.getQueue(queue_name)
        if queue is None:
            logger.debug(f"Queue '{queue_name}' is not defined.")
            return False

        if operation.jobOwnerAllowed and job_owner is not None and user == job_owner:
            return True

        acl = queue.getAcl(operation)
        if acl is None:
            logger.debug(f"Queue '{queue_name}' has no ACL for operation '{operation}'.")
            return False

        return acl.isUserAllowed(user, groups)
