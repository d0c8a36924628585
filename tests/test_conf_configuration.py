# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from qtree_lib.conf.configuration import Configuration
from qtree_lib.core.error import QTreeError


def test_configuration_get_returns_value_or_default():
    conf = Configuration({"mapred.queue.names": "a,b"})

    assert conf.get("mapred.queue.names") == "a,b"
    assert conf.get("mapred.acls.enabled") is None
    assert conf.get("mapred.acls.enabled", "false") == "false"


def test_configuration_copies_initial_properties():
    properties = {"key": "value"}
    conf = Configuration(properties)
    properties["key"] = "changed"

    assert conf.get("key") == "value"


def test_configuration_empty_value_is_set():
    conf = Configuration({"mapred.queue.names": ""})

    assert conf.get("mapred.queue.names") == ""
    assert "mapred.queue.names" in conf


@pytest.mark.parametrize(
    "value,expected",
    [
        ("a", ["a"]),
        ("a,b", ["a", "b"]),
        (" a , b ", ["a", "b"]),
        ("a,,b", ["a", "b"]),
        ("", []),
        ("  ", []),
    ],
)
def test_configuration_get_strings(value, expected):
    conf = Configuration({"key": value})

    assert conf.getStrings("key") == expected


def test_configuration_get_strings_unset_returns_none():
    assert Configuration().getStrings("key") is None


@pytest.mark.parametrize(
    "value,default,expected",
    [
        ("true", False, True),
        ("TRUE", False, True),
        (" True ", False, True),
        ("false", True, False),
        ("False", True, False),
        ("yes", False, False),
        ("yes", True, True),
        ("", True, True),
    ],
)
def test_configuration_get_boolean(value, default, expected):
    conf = Configuration({"key": value})

    assert conf.getBoolean("key", default) is expected


def test_configuration_get_boolean_unset_returns_default():
    assert Configuration().getBoolean("key", False) is False
    assert Configuration().getBoolean("key", True) is True


def test_configuration_container_protocol():
    conf = Configuration({"a": "1", "b": "2"})

    assert len(conf) == 2
    assert "a" in conf
    assert "c" not in conf


def test_configuration_from_dict_joins_lists():
    conf = Configuration.fromDict(
        {"mapred.queue.names": ["a", "b"], "flags": [True, 3], "empty": []}
    )

    assert conf.get("mapred.queue.names") == "a,b"
    assert conf.getStrings("mapred.queue.names") == ["a", "b"]
    assert conf.get("flags") == "true,3"
    assert conf.get("empty") == ""


def test_configuration_from_dict_nested_mapping_raises():
    with pytest.raises(QTreeError, match="'mapred.queue'"):
        Configuration.fromDict({"mapred.queue": {"names": "a,b"}})


def test_configuration_from_yaml_list_value(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("mapred.queue.names: [a, b]\n")

    conf = Configuration.fromFile(file)

    assert conf.getStrings("mapred.queue.names") == ["a", "b"]


def test_configuration_from_yaml_nested_mapping_raises(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("mapred:\n  queue:\n    names: a,b\n")

    with pytest.raises(QTreeError, match="nested mapping"):
        Configuration.fromFile(file)


def test_configuration_from_dict_converts_and_skips_none():
    conf = Configuration.fromDict(
        {
            "mapred.queue.names": "a,b",
            "mapred.acls.enabled": False,
            "mapred.queue.a.state": None,
            "some.number": 10,
        }
    )

    assert conf.get("mapred.queue.names") == "a,b"
    assert conf.get("mapred.acls.enabled") == "false"
    assert "mapred.queue.a.state" not in conf
    assert conf.get("some.number") == "10"


def test_configuration_from_xml(tmp_path):
    file = tmp_path / "mapred-site.xml"
    file.write_text("""<?xml version="1.0"?>
<configuration>
  <property>
    <name>mapred.queue.names</name>
    <value>default, research</value>
  </property>
  <property>
    <name>mapred.queue.research.acl-submit-job</name>
    <value> alice admins </value>
  </property>
  <property>
    <name>mapred.acls.enabled</name>
    <value>true</value>
    <final>true</final>
  </property>
  <property>
    <name>mapred.queue.default.state</name>
  </property>
  <property>
    <value>orphan</value>
  </property>
</configuration>
""")

    conf = Configuration.fromXml(file)

    assert len(conf) == 4
    assert conf.getStrings("mapred.queue.names") == ["default", "research"]
    assert conf.get("mapred.queue.research.acl-submit-job") == "alice admins"
    assert conf.getBoolean("mapred.acls.enabled", False) is True
    assert conf.get("mapred.queue.default.state") == ""


def test_configuration_from_xml_later_property_overrides_earlier(tmp_path):
    file = tmp_path / "mapred-site.xml"
    file.write_text("""<configuration>
  <property><name>key</name><value>first</value></property>
  <property><name>key</name><value>second</value></property>
</configuration>
""")

    assert Configuration.fromXml(file).get("key") == "second"


def test_configuration_from_xml_invalid_raises(tmp_path):
    file = tmp_path / "broken.xml"
    file.write_text("<configuration><property>")

    with pytest.raises(QTreeError, match="Could not parse"):
        Configuration.fromXml(file)


def test_configuration_from_xml_wrong_root_raises(tmp_path):
    file = tmp_path / "queues.xml"
    file.write_text("<queues><queue><name>default</name></queue></queues>")

    with pytest.raises(QTreeError, match="expected root element 'configuration'"):
        Configuration.fromXml(file)


def test_configuration_from_yaml(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("""
mapred.queue.names: a,b
mapred.acls.enabled: true
mapred.queue.a.state: STOPPED
""")

    conf = Configuration.fromYaml(file)

    assert conf.getStrings("mapred.queue.names") == ["a", "b"]
    assert conf.get("mapred.acls.enabled") == "true"
    assert conf.get("mapred.queue.a.state") == "STOPPED"


def test_configuration_from_yaml_empty_file(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("")

    assert len(Configuration.fromYaml(file)) == 0


def test_configuration_from_yaml_not_mapping_raises(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("- a\n- b\n")

    with pytest.raises(QTreeError, match="expected a mapping"):
        Configuration.fromYaml(file)


def test_configuration_from_yaml_invalid_raises(tmp_path):
    file = tmp_path / "site.yaml"
    file.write_text("key: [unclosed\n")

    with pytest.raises(QTreeError, match="Could not parse"):
        Configuration.fromYaml(file)


def test_configuration_from_file_dispatches_on_suffix(tmp_path):
    xml_file = tmp_path / "site.xml"
    xml_file.write_text(
        "<configuration><property><name>k</name><value>x</value></property></configuration>"
    )
    yml_file = tmp_path / "site.yml"
    yml_file.write_text("k: y\n")

    assert Configuration.fromFile(xml_file).get("k") == "x"
    assert Configuration.fromFile(yml_file).get("k") == "y"


def test_configuration_from_file_missing_raises(tmp_path):
    with pytest.raises(QTreeError, match="does not exist"):
        Configuration.fromFile(tmp_path / "missing.xml")


def test_configuration_from_file_unsupported_suffix_raises(tmp_path):
    file = tmp_path / "site.ini"
    file.write_text("[section]\n")

    with pytest.raises(QTreeError, match="Unsupported configuration file format"):
        Configuration.fromFile(file)
