"""Pytest config to ensure project root is on sys.path during test collection.

Running pytest from another working directory can otherwise fail with
"No module named 'hxtrigger'". ENV defaults to 'test', which the app treats
like 'development': the CORS middleware for the local dev origins is
installed, so the CORS tests see its headers.
"""
import os
import sys

_HERE = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(_HERE, "..", ".."))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("ENV", "test")
