"""API layer: controllers, middleware and exception handlers."""
