# python
import logging
from pathlib import Path

from ini_guard import ConfigRegistry, ConfigValidationError

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    config = ConfigRegistry.from_file(Path(__file__).with_name("app.ini"))

    config.register_string("", "name", "unnamed")
    config.register_integer("DEFAULT", "workers", 1)
    config.register_string("net", "host", "127.0.0.1")
    config.register_integer("net", "port", required=True)
    config.register_float("net", "timeout", 10)
    config.register_boolean("net", "tls", True)
    config.register_string_array("net", "allowed_hosts", ["localhost"])
    config.register_string("net", "proxy")

    try:
        config.ensure_valid()
    except ConfigValidationError as exc:
        print("Config errors:", exc.errors)
        raise SystemExit(1)

    port, _ = config.get_integer("net", "port")
    hosts, _ = config.get_string_array("net", "allowed_hosts")
    print("Listening on port", port, "for", hosts)
    print("Resolved:", {g: dict(items) for g, items in config.snapshot().items()})
