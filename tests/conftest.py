# python
import pytest

from ini_guard import ConfigRegistry, reset_config

SAMPLE_INI = (
    "[DEFAULT]\n"
    "string_val = asdf.asdf\n"
    "int_val = 2\n"
    "float_val = 123.0\n"
    "string_list = a,b,c\n"
    "bool_value = true\n"
    "\n"
)


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def ini_path(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(SAMPLE_INI, encoding="utf-8")
    return path


@pytest.fixture
def registry(ini_path):
    reg = ConfigRegistry.from_file(ini_path)
    yield reg
    reg.reset()
