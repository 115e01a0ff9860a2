# plotting.py
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.widgets import CheckButtons

from .geometry import points_to_array


# ============================================================
# Single views
# ============================================================
def _axes(ax, title=None):
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 7))
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)
    return ax


def plot_points(points, ax=None, annotate=True):
    """Scatter the points, labelled with their index."""
    coords = points_to_array(points)
    ax = _axes(ax)
    ax.scatter(coords[:, 0], coords[:, 1], color="red", zorder=5, label="Points")
    if annotate:
        for i, (x, y) in enumerate(coords):
            ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4), fontsize=8)
    return ax


def plot_tour(points, tour, ax=None, label=None, color=None, title=None):
    """Draw a closed tour given as a sequence of point indices."""
    coords = points_to_array(points)
    ax = _axes(ax, title)
    ordered = coords[list(tour)]
    line, = ax.plot(ordered[:, 0], ordered[:, 1], "-o", color=color, lw=1.5, ms=4, label=label)
    return ax, line


def plot_mst(points, parents, ax=None, color="green", title="Minimum spanning tree"):
    """Draw the tree given as a parent array (-1 for the root)."""
    coords = points_to_array(points)
    ax = _axes(ax, title)
    for v, p in enumerate(parents):
        if p == -1:
            continue
        ax.plot([coords[v, 0], coords[p, 0]], [coords[v, 1], coords[p, 1]], color=color, lw=1.5)
    ax.scatter([coords[0, 0]], [coords[0, 1]], s=90, color="gold", zorder=6, label="root")
    return ax


def plot_greedy_edges(points, edges, ax=None, color="purple", title="Greedy edges"):
    """Draw the edge set selected by the greedy solver, thicker for earlier picks."""
    coords = points_to_array(points)
    ax = _axes(ax, title)
    widths = np.linspace(3.0, 1.0, num=max(len(edges), 1))
    for edge, width in zip(edges, widths):
        a, b = edge.vertices
        ax.plot([coords[a, 0], coords[b, 0]], [coords[a, 1], coords[b, 1]], color=color, lw=width)
    return ax


# ============================================================
# Comparison view (checkbox toggle per solver)
# ============================================================
def plot_solutions(points, results, title: str = "", show=True):
    """
    Plot every solver's tour over the same points, with checkboxes to show
    or hide each one. `results` maps solver name to a TourResult (or to a
    (TourResult, runtime) pair as returned by compare_solvers).
    """
    fig, ax = plt.subplots(figsize=(7, 7))
    plot_points(points, ax=ax)

    labels = []
    lines = []
    colors = plt.cm.tab10.colors
    for idx, (name, result) in enumerate(results.items()):
        if isinstance(result, tuple):
            result = result[0]
        label = f"{name} ({result.distance:.2f})"
        _, line = plot_tour(points, result.tour, ax=ax, label=label, color=colors[idx % len(colors)])
        labels.append(label)
        lines.append(line)

    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)

    if labels:
        fig.subplots_adjust(left=0.25)
        height = 0.04 * len(labels)
        rax = fig.add_axes([0.02, 0.5 - height / 2, 0.2, height])
        check = CheckButtons(rax, labels, [True] * len(labels))

        def toggle_visibility(label):
            index = labels.index(label)
            lines[index].set_visible(not lines[index].get_visible())
            fig.canvas.draw_idle()

        check.on_clicked(toggle_visibility)
        # keep the widget alive as long as the figure
        fig._solver_toggles = check

    if show:
        plt.show()
    return fig, ax
