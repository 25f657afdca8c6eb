"""Simple cut visualization helpers for debugging."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib.pyplot as plt

from polycut import cut_polygon, polygon_area
from polycut.core.coords import as_lines, as_polygon_array


def plot_cut(polygon, lines, title: str = "Polygon Cut"):
    """Plot the original polygon and its fragments side by side.

    Args:
        polygon: Polygon vertices
        lines: Cutting lines, drawn on both panels
        title: Plot title
    """
    points = as_polygon_array(polygon)
    cut_lines = as_lines(lines)
    fragments = cut_polygon(points, cut_lines)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    # Plot original
    _plot_ring(ax1, points, color='red', alpha=0.5)
    ax1.set_title(f"Original (area {polygon_area(points)})")

    # Plot fragments, one color each
    cmap = plt.get_cmap('tab10')
    for i, fragment in enumerate(fragments):
        _plot_ring(ax2, fragment, color=cmap(i % 10), alpha=0.5)
    ax2.set_title(f"{len(fragments)} fragments")

    for ax in (ax1, ax2):
        for (x1, y1), (x2, y2) in cut_lines:
            ax.plot([x1, x2], [y1, y2], color='black', linestyle='--', linewidth=1)
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _plot_ring(ax, points, color='blue', alpha=0.5):
    """Fill a vertex array as a closed ring; degenerate fragments are drawn as lines."""
    if len(points) == 0:
        return
    x = list(points[:, 0]) + [points[0, 0]]
    y = list(points[:, 1]) + [points[0, 1]]
    if len(points) < 3:
        ax.plot(x, y, color=color, linewidth=2)
        return
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)


if __name__ == '__main__':
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    plot_cut(square, [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]], title="Diagonal then vertical")
    plot_cut(square, [[(0.1, 0), (1, 1)]], title="Off-center diagonal")
