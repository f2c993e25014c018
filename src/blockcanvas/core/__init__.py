"""Core package initializer for blockcanvas.

Downstream code imports from the submodules directly:
    from blockcanvas.core.settings import load_settings, Settings, get_logger
    from blockcanvas.core.contracts.block import SimpleBlock, ComplexBlock
"""

from __future__ import annotations

__all__ = ["__doc__"]
