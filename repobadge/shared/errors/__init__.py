"""
Shared error handling package.

Adapts upstream failures into the domain taxonomy and centralizes
error-to-HTTP mapping so every failure ends in one of two HTML pages.
"""
