"""
Intersection Example: a lens cut from two discs

Mathematical expectation:
- Left circle at (220, 192) radius 80, emissive 1.0
- Right circle at (292, 192) radius 80, emissive 0.25
- Intersection = max(left, right), emission from the farther surface
- At (256, 192): both distances are -44; the tie goes to the right circle
- At (200, 192): left = -20, right = 12, result 12 with the right's emission
- At (310, 192): left = 10, right = -62, result 10 with the left's emission
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from light2d import Circle, Scene, intersect


def main():
    left = Circle((220.0, 192.0), 80.0, emissive=1.0)
    right = Circle((292.0, 192.0), 80.0, emissive=0.25)

    points = np.array([[200.0, 192.0], [310.0, 192.0]])
    expected = np.maximum(left.sdf(points).distance, right.sdf(points).distance)

    lens = intersect(left, right)
    s = lens.sdf(points)

    print("=" * 60)
    print("INTERSECTION EXAMPLE: Lens")
    print("=" * 60)
    print(f"Distances: {s.distance}")
    print(f"Emissive:  {s.emissive}")

    max_diff = np.abs(s.distance - expected).max()
    print(f"Max difference from expected max(left, right): {max_diff:.6e}")

    scene = Scene(512, 384, lens, sample_count=64, max_step=10)
    out = scene.render_to_file("intersection_example.png", rng=7)
    print(f"Rendered: {out}")

    success = max_diff < 1e-12 and s.emissive[0] == 0.25 and s.emissive[1] == 1.0
    print("\n" + "=" * 60)
    if success:
        print("✅ INTERSECTION TEST PASSED: Matches max(left, right) exactly")
    else:
        print("❌ INTERSECTION TEST FAILED")
    print("=" * 60)


if __name__ == "__main__":
    main()
