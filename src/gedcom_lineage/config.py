import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_lineage.yml"
CONFIG_ENV_VAR = "GEDCOM_LINEAGE_CONFIG"

DEFAULT_LAYOUT = {
    "node_width": 140,
    "node_height": 60,
    "spouse_width": 160,
    "horizontal_gap": 30,
    "vertical_gap": 80,
}

DEFAULT_TREE = {
    "max_depth": 8,
    "nasab_depth": 2,
}


class GLConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.layout = {**DEFAULT_LAYOUT, **(data.get("layout", {}) or {})}
        self.tree = {**DEFAULT_TREE, **(data.get("tree", {}) or {})}
        self.debug = data.get("debug", False)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'GLConfig':
    path = config_path()
    if not path.exists():
        # Installed without the project tree: run on built-in defaults.
        return GLConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GLConfig(data)

_config_cache = None

def get_config() -> 'GLConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
