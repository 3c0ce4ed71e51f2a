from __future__ import annotations
import numpy as np

def latency_stats(samples) -> dict:
    """Summary of per-image latencies (seconds). Empty input gives count=0 and None stats."""
    a = np.asarray(samples, dtype=np.float64)
    if a.size == 0:
        return {'count': 0, 'total_s': 0.0, 'avg_s': None, 'p50_s': None,
                'p95_s': None, 'min_s': None, 'max_s': None}
    return {
        'count': int(a.size),
        'total_s': float(np.sum(a)),
        'avg_s': float(np.sum(a) / a.size),
        'p50_s': float(np.percentile(a, 50)),
        'p95_s': float(np.percentile(a, 95)),
        'min_s': float(np.min(a)),
        'max_s': float(np.max(a)),
    }
