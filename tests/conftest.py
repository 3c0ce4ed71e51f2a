from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from imgbench.models.engine import InferenceEngine, ModelHandle


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def write_png(path: Path, size=(8, 8), color=(255, 0, 0)) -> Path:
    img = Image.new("RGB", size, color=color)
    img.save(path, format="PNG")
    return path


@pytest.fixture()
def make_png():
    return write_png


@pytest.fixture()
def image_dir(tmp_path: Path) -> Path:
    """Two decodable images plus a subdirectory that must be ignored."""
    d = tmp_path / "imgs"
    d.mkdir()
    write_png(d / "red.png", size=(31, 17), color=(255, 0, 0))
    write_png(d / "gray.png", size=(300, 200), color=(128, 128, 128))
    sub = d / "nested"
    sub.mkdir()
    write_png(sub / "hidden.png", size=(8, 8), color=(0, 0, 255))
    return d


@pytest.fixture(scope="session")
def tiny_onnx_model(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A (1,3,224,224) -> (1,3) model: global average pool then flatten."""
    import onnx
    from onnx import TensorProto, helper

    inp = helper.make_tensor_value_info("input", TensorProto.FLOAT, [1, 3, 224, 224])
    out = helper.make_tensor_value_info("output", TensorProto.FLOAT, [1, 3])
    nodes = [
        helper.make_node("GlobalAveragePool", ["input"], ["pooled"]),
        helper.make_node("Flatten", ["pooled"], ["output"], axis=1),
    ]
    graph = helper.make_graph(nodes, "tiny_gap", [inp], [out])
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    model.ir_version = 8
    onnx.checker.check_model(model)

    path = tmp_path_factory.mktemp("model") / "tiny_gap.onnx"
    onnx.save(model, str(path))
    return path


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class FakeEngine(InferenceEngine):
    """Deterministic engine: each run takes `duration` seconds of fake time."""

    name = "fake"

    def __init__(self, clock: FakeClock = None, duration: float = 0.25):
        self.clock = clock
        self.duration = duration
        self.calls = 0

    def load(self, model_path, options):
        return ModelHandle(model_path, None, "FakeModel()")

    def run(self, handle, inputs):
        self.calls += 1
        if self.clock is not None:
            self.clock.now += self.duration
        x = inputs["input"]
        return {"output": x.mean(axis=(2, 3))}


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def fake_engine(fake_clock):
    return FakeEngine(clock=fake_clock, duration=0.25)


def expected_value(v: int, c: int) -> np.float32:
    mean = np.float32([0.485, 0.456, 0.406][c])
    std = np.float32([0.229, 0.224, 0.225][c])
    return (np.float32(v) / np.float32(255.0) - mean) / std
