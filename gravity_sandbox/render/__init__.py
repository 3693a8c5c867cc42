"""Rendering of body snapshots."""

from gravity_sandbox.render.base import Renderer
from gravity_sandbox.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D"]
