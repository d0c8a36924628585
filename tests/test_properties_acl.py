# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from qtree_lib.properties.acl import AccessControlList


@pytest.mark.parametrize("acl_string", ["*", " * ", "*\n"])
def test_acl_wildcard_allows_everyone(acl_string):
    acl = AccessControlList(acl_string)

    assert acl.isAllAllowed()
    assert acl.getUsers() == []
    assert acl.getGroups() == []
    assert acl.isUserAllowed("anyone")
    assert str(acl) == "*"


def test_acl_default_is_wildcard():
    assert AccessControlList.default().isAllAllowed()


@pytest.mark.parametrize(
    "acl_string,users,groups",
    [
        ("alice", ["alice"], []),
        ("alice,bob", ["alice", "bob"], []),
        ("alice,bob admins", ["alice", "bob"], ["admins"]),
        ("alice admins,ops", ["alice"], ["admins", "ops"]),
        (" admins", [], ["admins"]),
        ("", [], []),
    ],
)
def test_acl_parses_users_and_groups(acl_string, users, groups):
    acl = AccessControlList(acl_string)

    assert not acl.isAllAllowed()
    assert acl.getUsers() == users
    assert acl.getGroups() == groups


def test_acl_user_allowed_by_name():
    acl = AccessControlList("alice,bob admins")

    assert acl.isUserAllowed("alice")
    assert acl.isUserAllowed("bob", ["users"])
    assert not acl.isUserAllowed("carol")


def test_acl_user_allowed_by_group():
    acl = AccessControlList("alice admins,ops")

    assert acl.isUserAllowed("carol", ["users", "ops"])
    assert not acl.isUserAllowed("carol", ["users"])


def test_acl_empty_allows_nobody():
    acl = AccessControlList("")

    assert not acl.isUserAllowed("alice", ["admins"])
    assert str(acl) == ""


@pytest.mark.parametrize(
    "acl_string,expected",
    [
        ("alice,bob", "alice,bob"),
        ("alice,bob admins,ops", "alice,bob admins,ops"),
        (" admins", " admins"),
    ],
)
def test_acl_str(acl_string, expected):
    assert str(AccessControlList(acl_string)) == expected


def test_acl_equality_and_hash():
    a = AccessControlList("alice admins")
    b = AccessControlList("alice admins")

    assert a == b
    assert hash(a) == hash(b)
    assert a != AccessControlList("alice")
    assert AccessControlList("*") == AccessControlList(" * ")
    assert a != "alice admins"


def test_acl_getters_return_copies():
    acl = AccessControlList("alice admins")
    acl.getUsers().append("mallory")
    acl.getGroups().append("root")

    assert acl.getUsers() == ["alice"]
    assert acl.getGroups() == ["admins"]
