import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from netlat.topology.spanning_tree import cable_pairs


def circular_layout(n):
    """Vertex positions evenly spaced on the unit circle, vertex 0 at the top."""
    if n == 0:
        return np.zeros((0, 2))
    theta = np.pi / 2 - 2 * np.pi * np.arange(n) / n
    return np.column_stack([np.cos(theta), np.sin(theta)])


def marked_cables(graph, highlight=None):
    """One (edge, selected) tuple per cable; a cable is selected when either direction is in `highlight`."""
    chosen = {id(e) for e in highlight or ()}
    return [
        (e, id(e) in chosen or (twin is not None and id(twin) in chosen))
        for e, twin in cable_pairs(graph.edges())
    ]


def plot_network(
    graph,
    out_png,
    highlight=None,
    title="Network Latency Map"
):
    """
    Draw the cables on a circular layout; copper solid, optical dashed.
    `highlight` is an optional edge collection (shortest path, spanning tree).
    """
    pos = circular_layout(graph.V)
    cables = marked_cables(graph, highlight)

    fig, ax = plt.subplots(figsize=(7, 7))

    for e, hot in cables:
        (x0, y0), (x1, y1) = pos[e.source], pos[e.destination]
        ax.plot(
            [x0, x1],
            [y0, y1],
            linestyle="-" if e.is_copper else "--",
            color="crimson" if hot else ("darkorange" if e.is_copper else "steelblue"),
            linewidth=3.0 if hot else 1.2,
            alpha=0.95 if hot else 0.6,
            zorder=2 if hot else 1
        )
        mx, my = (x0 + x1) / 2, (y0 + y1) / 2
        ax.annotate(f"{e.latency:.1f}", (mx, my), fontsize=7, color="dimgray", ha="center")

    if graph.V:
        ax.scatter(
            pos[:, 0],
            pos[:, 1],
            s=300,
            c="white",
            edgecolors="black",
            linewidths=1.0,
            zorder=3
        )
        for v, (x, y) in enumerate(pos):
            ax.annotate(str(v), (x, y), ha="center", va="center", fontsize=9, zorder=4)

    ax.plot([], [], linestyle="-", color="darkorange", label="Copper")
    ax.plot([], [], linestyle="--", color="steelblue", label="Optical")
    if any(hot for _e, hot in cables):
        ax.plot([], [], linestyle="-", color="crimson", linewidth=3.0, label="Selected")

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.legend(loc="upper right", framealpha=0.85)

    plt.tight_layout()
    plt.savefig(out_png, dpi=160)
    plt.close(fig)
