"""
Base exception for Mandataire.
"""

from typing import Optional


class MandataireException(Exception):
    """Base exception for delegation checks and ping transactions."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
