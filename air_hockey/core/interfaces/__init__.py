"""
Protocols implemented by the collaborators of the Air Hockey core
"""

from air_hockey.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
