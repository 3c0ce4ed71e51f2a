from __future__ import annotations
import os
from typing import Any, Dict

import numpy as np
import onnxruntime as ort

from .engine import EngineOptions, InferenceEngine, ModelHandle

ORT_OPT_LEVELS = {
    'disable': ort.GraphOptimizationLevel.ORT_DISABLE_ALL,
    'basic': ort.GraphOptimizationLevel.ORT_ENABLE_BASIC,
    'extended': ort.GraphOptimizationLevel.ORT_ENABLE_EXTENDED,
    'all': ort.GraphOptimizationLevel.ORT_ENABLE_ALL,
}

def make_session_options(options: EngineOptions) -> ort.SessionOptions:
    if options.graph_optimization_level not in ORT_OPT_LEVELS:
        raise ValueError(f"Unknown graph optimization level: {options.graph_optimization_level!r}")
    so = ort.SessionOptions()
    so.graph_optimization_level = ORT_OPT_LEVELS[options.graph_optimization_level]
    so.intra_op_num_threads = options.intra_threads
    return so

def session_summary(sess: ort.InferenceSession, model_path: str, options: EngineOptions) -> str:
    lines = [f"InferenceSession(path={model_path!r}, providers={sess.get_providers()}, "
             f"graph_optimization_level={options.graph_optimization_level}, intra_threads={options.intra_threads})"]
    for i in sess.get_inputs():
        lines.append(f"  input  {i.name}: {i.type} {i.shape}")
    for o in sess.get_outputs():
        lines.append(f"  output {o.name}: {o.type} {o.shape}")
    return '\n'.join(lines)

class OrtEngine(InferenceEngine):
    name = 'ort'

    def load(self, model_path: str, options: EngineOptions) -> ModelHandle:
        if not os.path.isfile(model_path):
            raise FileNotFoundError(f"model not found: {model_path}")
        so = make_session_options(options)
        sess = ort.InferenceSession(model_path, so, providers=['CPUExecutionProvider'])
        return ModelHandle(model_path, sess, session_summary(sess, model_path, options))

    def run(self, handle: ModelHandle, inputs: Dict[str, np.ndarray]) -> Dict[str, Any]:
        sess = handle.runnable
        names = [o.name for o in sess.get_outputs()]
        outputs = sess.run(names, inputs)
        return dict(zip(names, outputs))
