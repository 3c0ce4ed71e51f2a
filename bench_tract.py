from __future__ import annotations
import argparse, os
from functools import partial

from imgbench.utils.config import load_config, apply_overrides
from imgbench.data.preprocess import preprocess_image
from imgbench.models.engine import EngineOptions
from imgbench.models.tract_engine import TractEngine
from imgbench.harness import run_benchmark
from imgbench.report import write_report

DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'configs', 'default.yaml')

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='MobileNetV2 inference latency over a directory of images (tract)')
    ap.add_argument('--config', default=DEFAULT_CONFIG)
    ap.add_argument('--image_dir', default=None)
    ap.add_argument('--out', default=None, help='write metrics.json and latency.png here')
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    cfg = apply_overrides(load_config(args.config), image_dir=args.image_dir)
    options = EngineOptions.from_cfg(cfg)

    # tract chooses its own passes and threading; engine options are not forwarded
    print(f"[LOAD] engine=tract model={cfg['model']['path']}")
    engine = TractEngine(cfg['model']['input_name'], cfg['model']['output_name'])
    handle = engine.load(cfg['model']['path'], options)
    print(handle.summary)

    preprocess = partial(preprocess_image, img_size=cfg['data']['img_size'],
                         mean=cfg['data']['mean'], std=cfg['data']['std'])
    summary = run_benchmark(engine, handle, cfg['data']['image_dir'],
                            input_name=cfg['model']['input_name'],
                            output_name=cfg['model']['output_name'],
                            preprocess=preprocess)

    if args.out:
        write_report(args.out, engine.name, cfg['model']['path'], cfg['data']['image_dir'], options, summary)
        print(f"[SAVE] report -> {args.out}")
    return summary

if __name__ == '__main__':
    main()
