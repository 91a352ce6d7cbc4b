# board_intel/config/loader.py
"""
Layered pipeline configuration.

configs/base.yaml < configs/pipeline.yaml < profiles/$CFG_PROFILE.yaml
< $BOARD_INTEL_CONFIG < call-site overrides < LOG_LEVEL / DATA_ROOT env.
"""
from pathlib import Path
from typing import Iterator, Optional
import os, warnings

from dotenv import load_dotenv
from omegaconf import OmegaConf, DictConfig, ListConfig
from pydantic_settings import BaseSettings

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"
BASE_FILES = ("base.yaml", "pipeline.yaml")

class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    DATA_ROOT: str = "./data"

def _replace_on_mismatch(base, top):
    """Recursive dict merge where any non-dict clash is won by `top`."""
    if not (isinstance(base, dict) and isinstance(top, dict)):
        return top
    merged = dict(base)
    for key, val in top.items():
        merged[key] = _replace_on_mismatch(merged[key], val) if key in merged else val
    return merged

def _overlay_files() -> Iterator[Path]:
    profile = os.environ.get("CFG_PROFILE")
    if profile:
        yield CONFIG_DIR / "profiles" / f"{profile}.yaml"
    extra = os.environ.get("BOARD_INTEL_CONFIG")
    if extra:
        yield Path(extra)

def _apply_overlay(conf: DictConfig, path: Path) -> DictConfig:
    if not path.is_file():
        warnings.warn(f"[config] overlay {path} not found; skipped.")
        return conf
    layer = OmegaConf.load(path)
    if isinstance(layer, ListConfig):
        warnings.warn(f"[config] {path} is a list at top level; ignored.")
        return conf
    try:
        return OmegaConf.merge(conf, layer)
    except Exception as e:
        # typed nodes refuse e.g. int -> mapping; fall back to plain containers
        warnings.warn(f"[config] strict merge of {path} failed ({e.__class__.__name__}); "
                      f"values from the overlay replace conflicting keys.")
        return OmegaConf.create(_replace_on_mismatch(OmegaConf.to_container(conf, resolve=True),
                                                     OmegaConf.to_container(layer, resolve=True)))

def load_cfg(overrides: Optional[dict] = None) -> DictConfig:
    load_dotenv()
    OmegaConf.register_new_resolver("env", lambda var, default=None: os.environ.get(var, default),
                                    replace=True)

    conf = OmegaConf.merge(*(OmegaConf.load(CONFIG_DIR / name) for name in BASE_FILES))
    for path in _overlay_files():
        conf = _apply_overlay(conf, path)
    if overrides:
        conf = OmegaConf.merge(conf, OmegaConf.create(overrides))

    settings = Settings()
    if "LOG_LEVEL" in os.environ:
        conf.logging.level = settings.LOG_LEVEL
    if "DATA_ROOT" in os.environ:
        conf.paths.data_root = settings.DATA_ROOT
        conf.paths.exports = str(Path(settings.DATA_ROOT) / "exports")

    conf.env = settings.model_dump()
    conf.config_dir = str(CONFIG_DIR)
    return conf
