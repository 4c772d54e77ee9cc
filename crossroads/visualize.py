"""Render a road network and a discovered route with NetworkX + Matplotlib."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.axes import Axes

from .exceptions import ConfigError
from .graph import RoadNetwork, Vertex

LAYOUTS = ("spring", "shell", "circular")


def _layout(G: nx.Graph, layout: str) -> Dict[Vertex, Tuple[float, float]]:
    if layout == "spring":
        return nx.spring_layout(G, seed=42)
    if layout == "shell":
        return nx.shell_layout(G)
    if layout == "circular":
        return nx.circular_layout(G)
    raise ConfigError(f"unknown layout {layout!r}; expected one of {LAYOUTS}")


def draw_network(
    G: RoadNetwork,
    source: Vertex = 1,
    target: Vertex = 2,
    path: Optional[Sequence[Vertex]] = None,
    *,
    layout: str = "spring",
    ax: Optional[Axes] = None,
    node_size: int = 300,
) -> Axes:
    """Draw ``G`` and highlight the source, the target and the route.

    Args:
        G: Road network.
        source: Crossroad drawn in red.
        target: Crossroad drawn in green.
        path: Crossroads along the route; consecutive pairs are drawn bold.
        layout: One of :data:`LAYOUTS`.
        ax: Axes to draw on; a new figure is created when omitted.
        node_size: Marker size passed to NetworkX.

    Returns:
        The axes that were drawn on.
    """
    # parallel roads are drawn once
    nxg = nx.Graph(G.to_networkx())
    pos = _layout(nxg, layout)
    if ax is None:
        _fig, ax = plt.subplots(figsize=(8, 6))

    colors: List[str] = []
    for node in nxg.nodes:
        if node == source:
            colors.append("tab:red")
        elif node == target:
            colors.append("tab:green")
        else:
            colors.append("tab:blue")

    nx.draw_networkx_nodes(nxg, pos, ax=ax, node_color=colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(nxg, pos, ax=ax, width=1.0, alpha=0.5)
    nx.draw_networkx_labels(nxg, pos, ax=ax, font_size=8)

    route = list(path or [])
    if len(route) > 1:
        route_edges = list(zip(route, route[1:]))
        nx.draw_networkx_edges(
            nxg,
            pos,
            ax=ax,
            edgelist=route_edges,
            width=3.0,
            edge_color="tab:orange",
        )

    ax.set_title(f"Road network: {source} -> {target}")
    ax.set_axis_off()
    return ax


def save_network_plot(
    G: RoadNetwork,
    out: Union[str, Path],
    source: Vertex = 1,
    target: Vertex = 2,
    path: Optional[Sequence[Vertex]] = None,
    *,
    layout: str = "spring",
) -> Path:
    """Draw ``G`` and write the figure to ``out``; the format follows the suffix."""
    fig, ax = plt.subplots(figsize=(8, 6))
    try:
        draw_network(G, source, target, path, layout=layout, ax=ax)
        fig.tight_layout()
        fig.savefig(out)
    finally:
        plt.close(fig)
    return Path(out)


__all__ = ["draw_network", "save_network_plot", "LAYOUTS"]
