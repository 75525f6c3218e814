"""Testing utilities for ModelConventions consumers."""

from .fixtures import build_application, RecordingConvention, FailingConvention

__all__ = ['build_application', 'RecordingConvention', 'FailingConvention']
