from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

@dataclass(frozen=True)
class EngineOptions:
    graph_optimization_level: str = 'all'
    intra_threads: int = 4

    @classmethod
    def from_cfg(cls, cfg: Dict[str, Any]) -> 'EngineOptions':
        eng = cfg.get('engine') or {}
        return cls(
            graph_optimization_level=eng.get('graph_optimization_level', 'all'),
            intra_threads=int(eng.get('intra_threads', 4)),
        )

@dataclass
class ModelHandle:
    """What `load` hands back: the backend's runnable plus a printable summary."""
    model_path: str
    runnable: Any
    summary: str

    def __str__(self):
        return self.summary

class InferenceEngine(ABC):
    """Narrow contract the harness needs from an inference backend."""

    name: str = 'base'

    @abstractmethod
    def load(self, model_path: str, options: EngineOptions) -> ModelHandle:
        ...

    @abstractmethod
    def run(self, handle: ModelHandle, inputs: Dict[str, np.ndarray]) -> Dict[str, Any]:
        ...
