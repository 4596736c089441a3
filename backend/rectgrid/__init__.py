"""RectGrid — rectangle edge meshes rendered as shaded HTML tables."""

__version__ = "0.1.0"
