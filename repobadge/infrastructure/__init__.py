"""
Infrastructure layer package.

Boundary helpers that touch upstream libraries and report their
failures on the Result channel.
"""
