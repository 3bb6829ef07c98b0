"""
Dependency injection.
"""

from mandataire.di.container import Container

__all__ = ["Container"]
