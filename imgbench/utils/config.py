from __future__ import annotations
import os
from typing import Any, Dict
import yaml

OPT_LEVELS = ['disable', 'basic', 'extended', 'all']

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def deep_get(d, keys, default=None):
    cur = d
    for k in keys:
        if isinstance(cur, dict) and k in cur:
            cur = cur[k]
        else:
            return default
    return cur

def normalize_opt_level(level) -> str:
    """Accepts a level name or its index (0..3) and returns the name."""
    if isinstance(level, bool):
        raise ValueError(f"Unknown graph optimization level: {level!r}")
    if isinstance(level, int):
        if 0 <= level < len(OPT_LEVELS):
            return OPT_LEVELS[level]
        raise ValueError(f"Unknown graph optimization level: {level!r}")
    s = str(level).strip().lower()
    if s not in OPT_LEVELS:
        raise ValueError(f"Unknown graph optimization level: {level!r} (expected one of {OPT_LEVELS})")
    return s

def load_config(path: str) -> Dict[str, Any]:
    """Loads a benchmark config and resolves its paths.

    `root` is relative to the directory holding the config file; `model.path`
    and `data.image_dir` are relative to `root`. Defaults are filled in so the
    returned dict always carries every key the drivers read.
    """
    cfg = load_yaml(path)
    cfg_dir = os.path.dirname(os.path.abspath(path))
    root = os.path.normpath(os.path.join(cfg_dir, str(cfg.get('root', '.'))))
    cfg['root'] = root

    model_path = deep_get(cfg, ['model', 'path'])
    if not model_path:
        raise KeyError(f"model.path missing from {path}")
    image_dir = deep_get(cfg, ['data', 'image_dir'])
    if not image_dir:
        raise KeyError(f"data.image_dir missing from {path}")

    model = cfg.setdefault('model', {})
    model['path'] = os.path.join(root, model_path)
    model.setdefault('input_name', 'input')
    model.setdefault('output_name', 'output')

    data = cfg.setdefault('data', {})
    data['image_dir'] = os.path.join(root, image_dir)
    data.setdefault('img_size', 224)
    data.setdefault('mean', [0.485, 0.456, 0.406])
    data.setdefault('std', [0.229, 0.224, 0.225])
    if len(data['mean']) != 3 or len(data['std']) != 3:
        raise ValueError("data.mean and data.std need exactly 3 values (R, G, B)")

    engine = cfg.get('engine') or {}
    cfg['engine'] = engine
    # an empty key (YAML null) means the default
    level = engine.get('graph_optimization_level')
    engine['graph_optimization_level'] = normalize_opt_level('all' if level is None else level)
    threads = engine.get('intra_threads')
    engine['intra_threads'] = int(4 if threads is None else threads)
    if engine['intra_threads'] < 1:
        raise ValueError(f"engine.intra_threads must be >= 1, got {engine['intra_threads']}")
    return cfg

def apply_overrides(cfg: Dict[str, Any], threads=None, image_dir=None) -> Dict[str, Any]:
    """CLI flags win over the file; None means 'keep the config value'."""
    if threads is not None:
        if int(threads) < 1:
            raise ValueError(f"--threads must be >= 1, got {threads}")
        cfg['engine']['intra_threads'] = int(threads)
    if image_dir is not None:
        cfg['data']['image_dir'] = os.path.abspath(image_dir)
    return cfg
