import json
import os

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

CONFIG_PATH = os.path.join(_project_root, "config.json")

DEFAULT_CONFIG = {
    "playlist_size": 5,
    "entries_file": "output/entries.json",
    "guest_cookie_name": "sonic_guest_id",
    "owner_header": "X-Owner-Key",
}


def load_config():
    if os.path.exists(CONFIG_PATH):
        with open(CONFIG_PATH) as f:
            return {**DEFAULT_CONFIG, **json.load(f)}
    return dict(DEFAULT_CONFIG)


def save_config(config_dict):
    with open(CONFIG_PATH, "w") as f:
        json.dump(config_dict, f, indent=2)


def entries_path(config=None):
    """Absolute path of the entries file (relative paths resolve from the project root)."""
    path = (config or load_config())["entries_file"]
    return path if os.path.isabs(path) else os.path.join(_project_root, path)
