"""Render every light2d preset and lay the results out on one page.

Usage::

    python scripts/gallery.py                   # saves gallery.png
    python scripts/gallery.py --out my_file.png # custom output path

Requirements: numpy, matplotlib, light2d
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

from light2d.examples import PRESETS, make_scene


def render_gallery(
    out_path: str,
    *,
    width: int = 192,
    height: int = 144,
    samples: int = 32,
    seed: int = 0,
    ncols: int = 4,
) -> None:
    names = sorted(PRESETS)
    nrows = (len(names) + ncols - 1) // ncols
    fig, axes = plt.subplots(
        nrows, ncols,
        figsize=(ncols * 3.2, nrows * 3.2 * height / width),
        facecolor="#111111",
    )
    axes = np.asarray(axes).ravel()

    for ax, name in zip(axes, names):
        scene = make_scene(name, width, height, sample_count=samples)
        image = scene.render_array(rng=seed)
        ax.set_facecolor("#111111")
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(name, color="white", fontsize=8, pad=3)
        for spine in ax.spines.values():
            spine.set_edgecolor("#444444")
        ax.imshow(image, interpolation="nearest")

    # Hide unused axes
    for ax in axes[len(names):]:
        ax.set_visible(False)

    fig.suptitle("light2d — preset scenes", color="white", fontsize=13, y=1.002)
    plt.tight_layout(pad=0.4)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render all light2d presets to a single PNG gallery.")
    parser.add_argument("--out", default="gallery.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=4, help="Number of columns (default 4)")
    parser.add_argument("--samples", type=int, default=32, help="Directions per pixel (default 32)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default 0)")
    args = parser.parse_args()

    render_gallery(args.out, samples=args.samples, seed=args.seed, ncols=args.cols)


if __name__ == "__main__":
    main()
