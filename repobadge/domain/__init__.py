"""
Domain layer package.

Contains the error taxonomy and the Result channel shared by every
fallible operation. No framework imports, no IO, no side effects.
"""
