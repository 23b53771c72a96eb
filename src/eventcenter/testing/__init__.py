"""
Testing utilities for code built on eventcenter.

Example:
    >>> from eventcenter.testing import RecordingHandler
"""

from eventcenter.testing.recording import RecordingHandler

__all__ = ["RecordingHandler"]
