"""Rendering for the sandbox."""

from planet_sandbox.render.renderer_2d import Renderer2D

__all__ = ["Renderer2D"]
