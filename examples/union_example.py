"""
Union Example: a bright disc next to a dim capsule

Mathematical expectation:
- Circle at (160, 192) radius 60, emissive 2.0
- Capsule from (300, 120) to (400, 260) radius 20, emissive 0.5
- Union = min(circle, capsule), emission from the nearer shape
- At (160, 192): circle distance -60 wins, emissive 2.0
- At (350, 190): inside the capsule, emissive 0.5
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from light2d import Capsule, Circle, Scene, union


def main():
    circle = Circle((160.0, 192.0), 60.0, emissive=2.0)
    tube = Capsule((300.0, 120.0), (400.0, 260.0), 20.0, emissive=0.5)

    points = np.array([[160.0, 192.0], [350.0, 190.0], [250.0, 40.0]])
    expected = np.minimum(circle.sdf(points).distance, tube.sdf(points).distance)

    shape = union(circle, tube)
    s = shape.sdf(points)

    print("=" * 60)
    print("UNION EXAMPLE: Disc and capsule")
    print("=" * 60)
    print(f"Distances: {s.distance}")
    print(f"Emissive:  {s.emissive}")

    max_diff = np.abs(s.distance - expected).max()
    print(f"Max difference from expected min(circle, capsule): {max_diff:.6e}")

    scene = Scene(512, 384, shape, sample_count=64, max_step=10)
    out = scene.render_to_file("union_example.png", rng=7)
    print(f"Rendered: {out}")

    success = max_diff < 1e-12 and s.emissive[0] == 2.0 and s.emissive[1] == 0.5
    print("\n" + "=" * 60)
    if success:
        print("✅ UNION TEST PASSED: Matches min(circle, capsule) exactly")
    else:
        print("❌ UNION TEST FAILED")
    print("=" * 60)


if __name__ == "__main__":
    main()
