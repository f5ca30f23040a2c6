"""Testing helpers for JSONNav consumers."""

from .fixtures import EventRecorder

__all__ = ['EventRecorder']
