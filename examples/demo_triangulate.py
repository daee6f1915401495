# examples/demo_triangulate.py
import structlog

from cg2d.delaunay import Delaunay2D

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
)

if __name__ == "__main__":
    # квадрат + кілька внутрішніх
    raw = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.3), (0.35, 0.15),
    ]

    d2 = Delaunay2D(raw)
    d2.build()                    # вставляє точки у порядку вводу, прибирає супер-трикутник

    report = d2.validate()
    print("VALIDATION:", report)
    print("boundary edges:", len(d2.mesh.extract_boundary_edges()))

    d2.mesh.write_off("delaunay.off")
    print("Wrote delaunay.off — відкривай у MeshLab/ParaView.")
