"""Hello World API with health reporting, served by FastAPI."""

__version__ = "1.0.0"
