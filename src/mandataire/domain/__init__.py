"""
Mandataire domain layer.
"""
