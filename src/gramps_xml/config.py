import os
import warnings
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from gramps_xml.utils.pathing import config_file

CONFIG_ENV_VAR = "GRAMPS_XML_CONFIG"
CONFIG_PATH = config_file("gramps_xml.yml")
# Shipped inside the package so installed copies work without a checkout.
BUNDLED_CONFIG = "resources/default_config.yml"


class GXConfig:
    def __init__(self, data, source: Optional[str] = None):
        self.paths = data.get("paths", {})
        self.schema = data.get("schema", {})
        self.export = data.get("export", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)
        self.source = source

    @property
    def schema_version(self) -> str:
        return str(self.schema.get("version", "1.7.2"))


def _config_path() -> Optional[Path]:
    """
    ``$GRAMPS_XML_CONFIG`` first, then ``config/gramps_xml.yml`` in a
    checkout. None means the bundled defaults apply.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if path.is_file():
            return path
        warnings.warn(f"{CONFIG_ENV_VAR} points to a missing file ({path}); using bundled defaults")
        return None

    return CONFIG_PATH if CONFIG_PATH.is_file() else None


def load_bundled_config() -> 'GXConfig':
    text = resources.files("gramps_xml").joinpath(BUNDLED_CONFIG).read_text(encoding="utf-8")
    return GXConfig(yaml.safe_load(text) or {}, source=f"gramps_xml/{BUNDLED_CONFIG}")


def load_config() -> 'GXConfig':
    path = _config_path()
    if path is None:
        return load_bundled_config()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GXConfig(data, source=str(path))

_config_cache = None

def get_config() -> 'GXConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
