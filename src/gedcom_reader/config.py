import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_reader.yml"

DEFAULT_ENCODINGS = ["utf-8-sig", "mac_roman"]


class GRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.reader = data.get("reader", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def encodings(self):
        return list(self.reader.get("encodings") or DEFAULT_ENCODINGS)

    @property
    def sort_individuals_by(self) -> str:
        return str(self.reader.get("sort_individuals_by", "xref"))


def load_config(path=None) -> 'GRConfig':
    """
    Load a YAML config file.

    An explicit ``path`` must exist. Without one, the project file
    ``config/gedcom_reader.yml`` is used, and built-in defaults apply when
    the package runs outside a source checkout.
    """
    if path is None:
        if not CONFIG_PATH.exists():
            return GRConfig({})
        config_path = CONFIG_PATH
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GRConfig(data)

_config_cache = None

def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
