"""
Shared pytest configuration.

GitPython probes for a git executable on import. The tests only build
GitPython exception objects, so a missing binary must not abort collection.
"""

import os

os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")
