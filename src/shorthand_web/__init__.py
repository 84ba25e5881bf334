"""Flask front end: JSON endpoints for the editor shell plus a small preview page."""
from .web import app, main

__all__ = ["app", "main"]
