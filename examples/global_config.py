import logging
from pathlib import Path

import ini_guard

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    ini_guard.init_config(Path(__file__).with_name("app.ini"))

    ini_guard.register_integer("DEFAULT", "workers", 1)
    # declared as a string but the file holds an integer: flagged, not raised
    ini_guard.register_string("net", "port", "80")

    print("Workers:", ini_guard.get_integer("DEFAULT", "workers"))
    print("Port as string:", ini_guard.get_string("net", "port"))
    print("Config valid:", ini_guard.is_config_valid())
