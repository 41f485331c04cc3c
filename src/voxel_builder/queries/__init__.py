"""Inspection tools for generated buildings.

- layers: text occupancy maps per layer
"""

from voxel_builder.queries.layers import LayerSlice, render_layer, render_layers

__all__ = ["LayerSlice", "render_layer", "render_layers"]
