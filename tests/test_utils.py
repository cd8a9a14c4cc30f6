from ini_guard.utils import DEFAULT_GROUP, normalize_group, redact_for_log


def test_normalize_group():
    assert normalize_group("") == DEFAULT_GROUP == "DEFAULT"
    assert normalize_group(None) == "DEFAULT"
    assert normalize_group("net") == "net"


def test_redact_for_log():
    assert redact_for_log("db_password", "hunter2") == "***"
    assert redact_for_log("API_KEY", "abc") == "***"
    assert redact_for_log("port", 8080) == "8080"

    class Unreprable:
        def __repr__(self):
            raise RuntimeError("nope")

    assert redact_for_log("thing", Unreprable()) == "<unreprable>"
