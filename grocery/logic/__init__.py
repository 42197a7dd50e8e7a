"""Core business logic layer.

Subpackages:
- pricing: ingredient price catalog
- shopping: grocery list generation pipeline and service entry points
- reporting: list progress and category summaries
"""
__all__ = ["pricing", "shopping", "reporting"]
