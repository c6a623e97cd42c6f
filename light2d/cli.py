"""Command-line entry point: ``light2d render|demo|list``.

Usage::

    light2d render scene.yaml -o scene.png --seed 7
    light2d demo crescent -o crescent.png --width 512 --height 384
    light2d list
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .builders import build_scene
from .config import load_config
from .errors import InvalidConfigError
from .examples import PRESETS, make_scene


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="[%(levelname)s] %(message)s")
    logging.getLogger("light2d").setLevel(numeric)


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output.")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads (default from config, else 1).")
    parser.add_argument("--samples", type=int, default=None, help="Directions sampled per pixel.")
    parser.add_argument("--max-step", type=int, default=None, help="Sphere-tracing iteration cap.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. INFO, DEBUG).")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="light2d",
        description="Render emissive 2-D signed-distance scenes to greyscale PNGs.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_p = sub.add_parser("render", help="Render a YAML scene file.")
    render_p.add_argument("config", type=Path, help="Path to YAML scene file.")
    render_p.add_argument("-o", "--output", type=Path, default=None, help="Output PNG (overrides the config).")
    _add_render_options(render_p)

    demo_p = sub.add_parser("demo", help="Render a built-in preset scene.")
    demo_p.add_argument("name", choices=sorted(PRESETS), help="Preset name.")
    demo_p.add_argument("-o", "--output", type=Path, default=None, help="Output PNG (default NAME.png).")
    demo_p.add_argument("--width", type=int, default=512, help="Image width in pixels.")
    demo_p.add_argument("--height", type=int, default=384, help="Image height in pixels.")
    _add_render_options(demo_p)

    sub.add_parser("list", help="List preset scene names.")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.samples is not None:
        overrides["sample_count"] = args.samples
    if args.max_step is not None:
        overrides["max_step"] = args.max_step
    return overrides


def _run_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Path:
    cfg = load_config(args.config)
    output = args.output
    if output is None:
        if cfg.output is None:
            parser.error("no output path: pass -o/--output or set output.path in the config")
        output = cfg.output.path
    cfg.render = cfg.render.model_copy(update=_overrides(args))
    scene = build_scene(cfg)
    return scene.render_to_file(output, rng=args.seed)


def _run_demo(args: argparse.Namespace) -> Path:
    scene = make_scene(args.name, args.width, args.height, **_overrides(args))
    output = args.output if args.output is not None else Path(f"{args.name}.png")
    return scene.render_to_file(output, rng=args.seed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        for name in sorted(PRESETS):
            print(name)
        return 0

    _configure_logging(args.log_level)
    try:
        if args.command == "render":
            out = _run_render(args, parser)
        else:
            out = _run_demo(args)
    except InvalidConfigError as exc:
        print(f"light2d: error: {exc}", file=sys.stderr)
        return 2
    print(f"Saved: {out}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
