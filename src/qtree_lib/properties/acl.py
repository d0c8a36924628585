# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Access-control lists guarding queue operations.

An ACL string is either the wildcard `*`, allowing everyone, or a comma-separated
list of users optionally followed by a single space and a comma-separated list
of groups, e.g. `alice,bob admins,ops`. A string with only groups starts with
a space (` admins`). An empty string allows nobody.
"""

from collections.abc import Iterable

from qtree_lib.core.common import split_comma_list
from qtree_lib.core.config import CFG


class AccessControlList:
    """
    Parsed access-control list naming the users and groups allowed to perform an operation.
    """

    WILDCARD = "*"

    def __init__(self, acl_string: str):
        """
        Parse an ACL string.

        Args:
            acl_string (str): The ACL in the `users groups` format or the wildcard.
        """
        self._all_allowed = acl_string.strip() == AccessControlList.WILDCARD
        self._users: list[str] = []
        self._groups: list[str] = []

        if self._all_allowed:
            return

        parts = acl_string.split(" ", 1)
        self._users = split_comma_list(parts[0])
        if len(parts) == 2:
            self._groups = split_comma_list(parts[1])

    @classmethod
    def default(cls) -> "AccessControlList":
        """Return the ACL used when nothing is configured."""
        return cls(CFG.legacy_keys.default_acl)

    def isAllAllowed(self) -> bool:
        """Return True if the ACL allows every user."""
        return self._all_allowed

    def getUsers(self) -> list[str]:
        """Return the users named by the ACL."""
        return list(self._users)

    def getGroups(self) -> list[str]:
        """Return the groups named by the ACL."""
        return list(self._groups)

    def isUserAllowed(self, user: str, groups: Iterable[str] = ()) -> bool:
        """
        Check whether the user, or any of their groups, is allowed by this ACL.

        Args:
            user (str): Name of the user.
            groups (Iterable[str]): Groups the user belongs to.

        Returns:
            bool: True if the user is allowed, False otherwise.
        """
        if self._all_allowed or user in self._users:
            return True

        return any(group in self._groups for group in groups)

    def __str__(self) -> str:
        if self._all_allowed:
            return AccessControlList.WILDCARD

        users = ",".join(self._users)
        if self._groups:
            return f"{users} {','.join(self._groups)}"
        return users

    def __repr__(self) -> str:
        return f"AccessControlList({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccessControlList):
            return NotImplemented
        return (
            self._all_allowed == other._all_allowed
            and self._users == other._users
            and self._groups == other._groups
        )

    def __hash__(self) -> int:
        return hash((self._all_allowed, tuple(self._users), tuple(self._groups)))
