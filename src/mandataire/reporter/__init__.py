"""
Logging utilities.
"""

from mandataire.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
