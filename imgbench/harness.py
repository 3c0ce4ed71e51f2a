from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .data.images import iter_image_files
from .data.preprocess import preprocess_image
from .models.engine import InferenceEngine, ModelHandle

@dataclass(frozen=True)
class BenchmarkRecord:
    path: str
    elapsed_s: float

@dataclass
class BenchmarkSummary:
    records: List[BenchmarkRecord] = field(default_factory=list)
    total_s: float = 0.0

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def mean_s(self) -> Optional[float]:
        if not self.records:
            return None
        return self.total_s / self.count

    def add(self, path: str, elapsed_s: float):
        self.records.append(BenchmarkRecord(path, elapsed_s))
        self.total_s += elapsed_s

def run_benchmark(
    engine: InferenceEngine,
    handle: ModelHandle,
    image_dir: str,
    input_name: str = 'input',
    output_name: str = 'output',
    preprocess: Callable[[str], np.ndarray] = preprocess_image,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkSummary:
    """Times one inference call per regular file in `image_dir`.

    Only the engine call is inside the timed window; preprocessing and output
    printing are not. Any error (decode, inference) aborts the run.
    """
    summary = BenchmarkSummary()
    for path in iter_image_files(image_dir):
        x = preprocess(path)

        t0 = clock()
        outputs = engine.run(handle, {input_name: x})
        elapsed = clock() - t0

        if output_name not in outputs:
            raise KeyError(f"output {output_name!r} not in engine result (got {sorted(outputs)})")
        summary.add(path, elapsed)

        print(f"Image {path}: Inference time = {elapsed:.2f} seconds")
        print(f"Predictions: {outputs[output_name]}")

    if summary.count > 0:
        print(f"\nProcessed {summary.count} images with average inference time = {summary.mean_s:.2f} seconds")
    else:
        print("No images found in the specified directory.")
    return summary
