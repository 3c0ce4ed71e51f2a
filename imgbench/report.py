from __future__ import annotations
import json
import os
from dataclasses import asdict

from .harness import BenchmarkSummary
from .models.engine import EngineOptions
from .utils.metrics import latency_stats
from .utils.paths import ensure_dir
from .utils.plotting import plot_latency

def write_report(out_dir: str, engine_name: str, model_path: str, image_dir: str,
                 options: EngineOptions, summary: BenchmarkSummary) -> dict:
    """Writes metrics.json (and latency.png when anything ran) into `out_dir`."""
    ensure_dir(out_dir)
    out = {
        'engine': engine_name,
        'model': model_path,
        'image_dir': image_dir,
        'options': asdict(options),
        'stats': latency_stats([r.elapsed_s for r in summary.records]),
        'records': [{'path': r.path, 'elapsed_s': r.elapsed_s} for r in summary.records],
    }
    with open(os.path.join(out_dir, 'metrics.json'), 'w', encoding='utf-8') as f:
        json.dump(out, f, indent=2)

    if summary.count:
        plot_latency([r.path for r in summary.records], [r.elapsed_s for r in summary.records],
                     os.path.join(out_dir, 'latency.png'), title=f"{engine_name} inference latency")
    return out
