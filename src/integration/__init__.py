"""Integration layer: DTOs and repository implementations."""
