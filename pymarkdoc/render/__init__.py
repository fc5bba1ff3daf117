"""Rendering of package models into markdown documents."""

from .normalize import normalize
from .renderer import RenderOptions, Renderer

__all__ = ["RenderOptions", "Renderer", "normalize"]
