"""Display package - chart models, renderers and display drivers."""

from battherm.display.framebuffer import FramebufferDisplay
from battherm.display.protocols import Display, MockDisplay

__all__ = ["Display", "FramebufferDisplay", "MockDisplay"]
