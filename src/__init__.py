"""Riko Chat Gateway - Source Package.

Note: Import `app` directly from `src.main` to avoid circular imports.
"""

__all__ = ["main", "api", "core", "models", "pipeline", "providers", "services"]
