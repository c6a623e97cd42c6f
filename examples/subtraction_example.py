"""
Subtraction Example: a crescent of light

Mathematical expectation:
- Base circle at (256, 192) radius 96, emissive 1.0
- Cutter circle at (300, 192) radius 80, emissive 0.0
- Subtraction = max(base, -cutter), emission always from the base
- At (256, 192) (base centre):
  - Base distance = -96 (inside)
  - Cutter distance = 44 - 80 = -36 (inside cutter)
  - Subtraction = max(-96, 36) = 36 (outside result, carved away)
- At (176, 192) (left horn of the crescent):
  - Base distance = 80 - 96 = -16 (inside)
  - Cutter distance = 124 - 80 = 44 (outside cutter)
  - Subtraction = max(-16, -44) = -16 (inside result), emissive 1.0
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from light2d import Circle, Scene, subtract


def main():
    base = Circle((256.0, 192.0), 96.0, emissive=1.0)
    cutter = Circle((300.0, 192.0), 80.0, emissive=0.0)

    points = np.array([[256.0, 192.0], [176.0, 192.0]])
    d_base = base.sdf(points).distance
    d_cutter = cutter.sdf(points).distance

    crescent = subtract(base, cutter)
    s = crescent.sdf(points)

    print("=" * 60)
    print("SUBTRACTION EXAMPLE: Crescent of light")
    print("=" * 60)
    print(f"Distances: {s.distance}")
    print(f"Emissive:  {s.emissive}")

    expected = np.maximum(d_base, -d_cutter)
    max_diff = np.abs(s.distance - expected).max()
    print(f"Max difference from expected max(base, -cutter): {max_diff:.6e}")

    scene = Scene(512, 384, crescent, sample_count=64, max_step=10)
    out = scene.render_to_file("subtraction_example.png", rng=7)
    print(f"Rendered: {out}")

    success = max_diff < 1e-12 and np.all(s.emissive == 1.0)
    print("\n" + "=" * 60)
    if success:
        print("✅ SUBTRACTION TEST PASSED: Matches max(base, -cutter) exactly")
    else:
        print("❌ SUBTRACTION TEST FAILED")
    print("=" * 60)


if __name__ == "__main__":
    main()
