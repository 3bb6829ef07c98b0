"""
Mandataire application layer.
"""
