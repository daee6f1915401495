# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

import structlog

from cg2d.delaunay import Delaunay2D
from cg2d.errors import TriangulationError

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
)


def generate_random_points(n: int):
    """
    Генерує n випадкових точок в одиничному квадраті [0,1]^2 + його вершини,
    щоб оболонка була нормальною (опуклий квадрат).
    """
    pts = [(0, 0), (1, 0), (1, 1), (0, 1)]
    for _ in range(n):
        pts.append((random.random(), random.random()))
    return pts


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x,y) як float.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
        points.append((x, y))
    if len(points) < 3:
        raise ValueError("Потрібно щонайменше 3 точки для тріангуляції.")
    return points


class DelaunayApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Delaunay 2D")
        self.geometry("800x650")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(
            mode_frame, text="Випадкові точки всередині квадрата",
            variable=self.input_mode, value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок",
            variable=self.input_mode, value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкових точок)")
        input_frame.pack(fill="x", pady=5)
        ttk.Label(input_frame, text="Кількість випадкових внутрішніх точок:").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "30")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)
        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n1 0\n1 1\n0 1\n0.4 0.6\n")

        ttk.Button(main, text="Запустити тріангуляцію", command=self.run).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)
        self.vertices_var = tk.StringVar(value="—")
        self.tris_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")
        for row, (label, var) in enumerate((
            ("Вершини:", self.vertices_var),
            ("Трикутників:", self.tris_var),
            ("Валідація:", self.valid_var),
        )):
            ttk.Label(result_frame, text=label).grid(row=row, column=0, sticky="w", padx=5, pady=2)
            ttk.Label(result_frame, textvariable=var).grid(row=row, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)
        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)

    def update_plot(self, mesh):
        """Перемалювати трикутники поточної тріангуляції."""
        self.ax.clear()
        if not mesh.triangles:
            self.ax.set_title("Немає трикутників")
            self.canvas.draw()
            return
        xs = [p.x for p in mesh.points]
        ys = [p.y for p in mesh.points]
        self.ax.triplot(xs, ys, mesh.simplices(), linewidth=0.6)
        self.ax.plot(xs, ys, "o", markersize=3)
        self.ax.set_aspect("equal")
        self.ax.set_title("Delaunay triangulation")
        self.canvas.draw()

    def run(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return
            points = generate_random_points(n)
        else:
            try:
                points = parse_points_from_text(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            d2 = Delaunay2D(points)
            d2.build()
        except TriangulationError as e:
            messagebox.showerror("Помилка тріангуляції", str(e))
            return

        report = d2.mesh.validate()
        self.update_plot(d2.mesh)

        self.vertices_var.set(str(len(d2.mesh.points)))
        self.tris_var.set(str(len(d2.triangles)))
        if report["bad_edges"] or report["degenerate"] or report["non_delaunay"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")
        print("VALIDATION:", report)


if __name__ == "__main__":
    app = DelaunayApp()
    app.mainloop()
