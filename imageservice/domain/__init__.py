"""
Domain layer: validated value types and errors.
"""
