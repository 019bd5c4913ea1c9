# MIT License (see LICENSE)
"""
Rendering adapters for trajectory output.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - ConsoleRenderer: Per-tick text output.
    - NullRenderer: No-op renderer for quiet runs and benchmarks.
    - BufferedRenderer: Records ticks and exposes them as a numpy array.

Typical usage:
    from projectile_sim.renderer import ConsoleRenderer

    renderer = ConsoleRenderer()
    for sample in simulation.run():
        renderer.render_sample(sample)
    renderer.finish()
"""
from .adapter import (
    RendererAdapter,
    ConsoleRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "ConsoleRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
