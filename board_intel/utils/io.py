# read/write json/yaml/text artifacts
from pathlib import Path
import json, yaml

def ensure_dir(p) -> Path:
    p = Path(p); p.mkdir(parents=True, exist_ok=True)
    return p

def write_json(obj, path):
    p = Path(path); ensure_dir(p.parent); p.write_text(json.dumps(obj, indent=2, ensure_ascii=False), encoding="utf-8")
    return p

def read_json(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))

def write_text(txt: str, path):
    p = Path(path); ensure_dir(p.parent); p.write_text(txt, encoding="utf-8")
    return p

def read_yaml(path):
    return yaml.safe_load(Path(path).read_text(encoding="utf-8"))
