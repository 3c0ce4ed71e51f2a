from __future__ import annotations
import onnx

def _dims(value_info):
    dims = []
    for d in value_info.type.tensor_type.shape.dim:
        if d.HasField('dim_value'):
            dims.append(d.dim_value)
        else:
            dims.append(d.dim_param or '?')
    return dims

def _dtype(value_info):
    return onnx.TensorProto.DataType.Name(value_info.type.tensor_type.elem_type)

def describe_model(model_path: str) -> str:
    """Human-readable summary of an ONNX file: graph, opsets, inputs, outputs."""
    model = onnx.load(model_path, load_external_data=False)
    g = model.graph
    initializers = {t.name for t in g.initializer}
    opsets = ', '.join(f"{o.domain or 'ai.onnx'}:{o.version}" for o in model.opset_import)
    lines = [f"Model(path={model_path!r}, graph={g.name!r}, ir_version={model.ir_version}, opsets=[{opsets}], nodes={len(g.node)})"]
    for vi in g.input:
        if vi.name in initializers:
            continue
        lines.append(f"  input  {vi.name}: {_dtype(vi)} {_dims(vi)}")
    for vi in g.output:
        lines.append(f"  output {vi.name}: {_dtype(vi)} {_dims(vi)}")
    return '\n'.join(lines)
