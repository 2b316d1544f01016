"""Résumé layout and pagination engine.

Turns a ResumeDocument into a paginated PDF in one of four templates.
"""
from .document_builder import DocumentBuilder, generate, generate_async, render
from .exceptions import (
    FontError,
    InvalidConfigurationError,
    MeasurementError,
    RenderCancelledError,
    RenderingError,
    ResumeLayoutError,
    SurfaceError,
    TemplateLockedError,
    ValidationError,
)
from .render_options import FontSizeScale, SpacingScale, StyleConfig, TemplateKind
from .render_result import RenderResult
from .resume import CustomSection, HistoryEntry, PersonalInfo, Project, ResumeDocument

__all__ = [
    'DocumentBuilder',
    'generate',
    'generate_async',
    'render',
    'RenderResult',
    'ResumeDocument',
    'PersonalInfo',
    'HistoryEntry',
    'Project',
    'CustomSection',
    'TemplateKind',
    'FontSizeScale',
    'SpacingScale',
    'StyleConfig',
    'ResumeLayoutError',
    'ValidationError',
    'InvalidConfigurationError',
    'TemplateLockedError',
    'RenderingError',
    'MeasurementError',
    'FontError',
    'SurfaceError',
    'RenderCancelledError',
]
