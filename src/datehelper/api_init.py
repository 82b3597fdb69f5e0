"""Locale bootstrap (import side-effect)."""
from .locales import standard as _standard  # noqa: F401
