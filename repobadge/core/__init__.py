"""
Core package.

Configuration and process-wide state consumed by the other layers.
"""
