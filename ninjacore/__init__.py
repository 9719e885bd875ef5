"""Build-system helpers: paths and escaping, strings, hashing, metrics, versions and a compiler wrapper."""

__version__ = "1.9.0"

__all__ = ["hashing", "metrics", "msvc_helper", "strings", "util", "version"]