"""Saved project format."""

from .project import VERSION, ExportSettings, LogoSettings, ProjectDocument

__all__ = [
    'ProjectDocument',
    'LogoSettings',
    'ExportSettings',
    'VERSION',
]
