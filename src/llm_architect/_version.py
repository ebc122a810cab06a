"""Package version, kept apart from __init__ so submodules can import it."""

__version__ = "0.1.0"
