from __future__ import annotations
import os
from typing import Any, Dict

import numpy as np

from .engine import EngineOptions, InferenceEngine, ModelHandle
from .onnx_info import describe_model

class TractEngine(InferenceEngine):
    """tract backend (tract >= 0.23 Python API).

    tract picks its own graph passes when it builds the runnable, and it runs
    single-threaded, so neither `graph_optimization_level` nor `intra_threads`
    is forwarded. Outputs are positional: output 0 is reported under
    `output_name`, any further outputs keep their index as key.
    """

    name = 'tract'

    def __init__(self, input_name: str = 'input', output_name: str = 'output'):
        self.input_name = input_name
        self.output_name = output_name

    def load(self, model_path: str, options: EngineOptions) -> ModelHandle:
        if not os.path.isfile(model_path):
            raise FileNotFoundError(f"model not found: {model_path}")
        import tract

        runnable = tract.onnx().load(model_path).into_model().into_runnable()
        summary = describe_model(model_path) + "\n  tract: runnable (level and threads chosen by tract)"
        return ModelHandle(model_path, runnable, summary)

    def run(self, handle: ModelHandle, inputs: Dict[str, np.ndarray]) -> Dict[str, Any]:
        if self.input_name not in inputs:
            raise KeyError(f"input {self.input_name!r} not provided (got {sorted(inputs)})")
        result = handle.runnable.run([inputs[self.input_name]])
        out = {}
        for i, value in enumerate(result):
            key = self.output_name if i == 0 else str(i)
            out[key] = value.to_numpy()
        return out
