from ini_guard.exceptions import (
    ConfigAlreadyInitializedError,
    ConfigDuplicateError,
    ConfigError,
    ConfigFileReadError,
    ConfigNotInitializedError,
    ConfigParseError,
    ConfigRegistrationError,
    ConfigRequiredError,
    ConfigTypeMismatchError,
    ConfigValidationError,
)


def test_config_validation_error_message_and_attrs():
    err = ConfigValidationError({"G.k": "bad"}, key="G.k", value=123)
    assert "Validation errors" in str(err)
    assert err.errors == {"G.k": "bad"}
    assert err.key == "G.k"
    assert err.value == 123


def test_registration_error_attrs():
    err = ConfigTypeMismatchError("G", "k", "wrong type")
    assert err.group == "G"
    assert err.item == "k"
    assert err.key == "G.k"
    assert str(err) == "[G] k: wrong type"


def test_file_and_parse_errors_carry_origin():
    err = ConfigFileReadError("/tmp/x.ini", "No such file")
    assert err.path == "/tmp/x.ini"
    assert "/tmp/x.ini" in str(err)
    perr = ConfigParseError("x.ini", "bad line")
    assert perr.source == "x.ini"
    assert perr.reason == "bad line"


def test_custom_exceptions_are_subclasses():
    for cls in (
        ConfigFileReadError,
        ConfigParseError,
        ConfigAlreadyInitializedError,
        ConfigNotInitializedError,
        ConfigRegistrationError,
        ConfigValidationError,
    ):
        assert issubclass(cls, ConfigError)
    for cls in (ConfigTypeMismatchError, ConfigDuplicateError, ConfigRequiredError):
        assert issubclass(cls, ConfigRegistrationError)
