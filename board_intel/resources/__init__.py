# board_intel/resources/__init__.py
from pathlib import Path
import yaml

RESOURCE_DIR = Path(__file__).resolve().parent

def load_template_catalog(name: str = "component_templates.yml") -> dict:
    """
    Look for the template catalog in common locations:
    - an absolute/relative path given as `name`
    - <package>/resources/<name>
    """
    candidates = [Path(name), RESOURCE_DIR / name]
    for p in candidates:
        if p.is_file():
            return yaml.safe_load(p.read_text(encoding="utf-8"))
    raise FileNotFoundError(
        f"{name} not found. Looked in:\n  - " +
        "\n  - ".join(str(c) for c in candidates)
    )
