"""
Shared module package.

Contains cross-cutting concerns used across layers:
- Error conversion and error-to-HTTP mapping
- Logging configuration
"""
