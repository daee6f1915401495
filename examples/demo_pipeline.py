# examples/demo_pipeline.py
from cg2d.pipeline import triangulate

if __name__ == "__main__":
    square = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.3), (0.5, 0.5),
    ]

    for backend in ("internal", "scipy"):
        pts, tris = triangulate(square, backend=backend, dedupe=True)
        print(f"[{backend}] Vertices:", len(pts))
        print(f"[{backend}] Triangles:", len(tris))
