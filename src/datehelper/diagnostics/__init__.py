"""Diagnostics package.

- pretty_month: month grid printer used by `datehelper month`
"""

__all__ = ["pretty_month"]
