"""Console tools for inspecting Figma files through the REST API."""

__version__ = "0.1.0"
