import pytest

from ini_guard.exceptions import ConfigDuplicateError
from ini_guard.params import ConfigValueType, ItemSpec, RegistrationTable


def test_zero_values():
    assert ConfigValueType.STRING.zero_value() == ""
    assert ConfigValueType.INTEGER.zero_value() == 0
    assert ConfigValueType.FLOAT.zero_value() == 0.0
    assert ConfigValueType.BOOLEAN.zero_value() is False
    assert ConfigValueType.STRING_ARRAY.zero_value() == ()
    with pytest.raises(ValueError):
        ConfigValueType.UNDEFINED.zero_value()


def test_itemspec_resolved_default_and_mapping():
    spec = ItemSpec(group="G", item="k", value_type=ConfigValueType.INTEGER, description="desc")
    assert spec.key == "G.k"
    assert spec.resolved_default() == 0
    m = spec.to_mapping()
    assert m["default"] == 0
    assert m["value_type"] is ConfigValueType.INTEGER
    assert m["required"] is False
    assert spec["description"] == "desc"

    with_default = ItemSpec(group="G", item="k", value_type=ConfigValueType.INTEGER, default=5)
    assert with_default.resolved_default() == 5
    assert "description" not in with_default.to_mapping()


def test_registration_table_register_and_lookup():
    table = RegistrationTable()
    table.register(ItemSpec(group="groupName", item="key1", value_type=ConfigValueType.STRING))
    table.register(ItemSpec(group="groupName", item="key2", value_type=ConfigValueType.INTEGER))

    assert table.has("groupName", "key1") is True
    assert table.has("groupName", "key3") is False
    assert table.has("other", "key1") is False
    assert table.registered_type("groupName", "key1") is ConfigValueType.STRING
    assert table.registered_type("groupName", "key2") is ConfigValueType.INTEGER
    assert table.registered_type("groupName", "nope") is ConfigValueType.UNDEFINED
    assert table.groups() == ("groupName",)
    assert table.items("groupName") == ("key1", "key2")
    assert len(table) == 2


def test_registration_table_never_overwrites():
    table = RegistrationTable()
    table.register(ItemSpec(group="G", item="k", value_type=ConfigValueType.STRING, default="a"))
    with pytest.raises(ConfigDuplicateError) as exc_info:
        table.register(ItemSpec(group="G", item="k", value_type=ConfigValueType.INTEGER))
    assert exc_info.value.key == "G.k"
    spec = table.get("G", "k")
    assert spec is not None
    assert spec.value_type is ConfigValueType.STRING
    assert spec.default == "a"


def test_registration_table_rejects_undefined():
    table = RegistrationTable()
    with pytest.raises(ValueError):
        table.register(ItemSpec(group="G", item="k", value_type=ConfigValueType.UNDEFINED))
    assert len(table) == 0


def test_registration_table_clear_and_iteration():
    table = RegistrationTable()
    table.register(ItemSpec(group="A", item="x", value_type=ConfigValueType.BOOLEAN))
    table.register(ItemSpec(group="B", item="y", value_type=ConfigValueType.FLOAT))
    assert [s.key for s in table.all_specs()] == ["A.x", "B.y"]
    table.clear()
    assert table.all_specs() == ()
    assert table.groups() == ()


def test_registration_table_logging(caplog):
    table = RegistrationTable()
    spec = ItemSpec(group="G", item="k", value_type=ConfigValueType.STRING)
    with caplog.at_level("DEBUG", logger="ini_guard.params"):
        table.register(spec)
        assert any("Register called:" in msg for msg in caplog.messages)
        with pytest.raises(ConfigDuplicateError):
            table.register(spec)
        assert any("already registered" in msg for msg in caplog.messages)
