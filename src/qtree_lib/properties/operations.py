# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum


class QueueOperation(Enum):
    """
    Operations that can be performed on a queue and guarded by an ACL.

    Each operation is stored as a pair of the ACL property suffix
    and a flag telling whether the owner of a job may always perform it.
    """

    SUBMIT_JOB = ("acl-submit-job", False)
    ADMINISTER_JOBS = ("acl-administer-jobs", True)

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def aclName(self) -> str:
        """Suffix of the per-queue property holding the ACL for this operation."""
        return self.value[0]

    @property
    def jobOwnerAllowed(self) -> bool:
        """Whether the owner of a job may perform the operation regardless of the ACL."""
        return self.value[1]
