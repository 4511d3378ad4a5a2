"""
ProjectDocument - saved project model and JSON I/O.

A saved project is a single JSON document:

    {
        "logoSettings": {"width": 400, "height": 400, "backgroundColor": "#ffffff", "title": "My Logo"},
        "layers": [...],
        "exportSettings": {...},
        "timestamp": 1700000000000,
        "version": "2.0"
    }

There is no migration: a document of another shape is loaded as far as
the models accept it.
"""

import json
import time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from logoforge.config import settings
from logoforge.exceptions import ProjectLoadError
from logoforge.layers import Layer
from logoforge.scene import CanvasSettings, Scene

# Current project format version
VERSION = "2.0"


class LogoSettings(BaseModel):
    """Canvas settings plus the project title."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    width: float = Field(default_factory=lambda: settings.DEFAULT_CANVAS_WIDTH)
    height: float = Field(default_factory=lambda: settings.DEFAULT_CANVAS_HEIGHT)
    background_color: str = Field(
        default_factory=lambda: settings.DEFAULT_BACKGROUND_COLOR, alias='backgroundColor'
    )
    title: str = Field(default='My Logo')

    def to_canvas(self) -> CanvasSettings:
        return CanvasSettings(
            width=self.width,
            height=self.height,
            background_color=self.background_color,
        )

    @classmethod
    def from_canvas(cls, canvas: CanvasSettings, title: str = 'My Logo') -> 'LogoSettings':
        return cls(
            width=canvas.width,
            height=canvas.height,
            background_color=canvas.background_color,
            title=title,
        )


class ExportSettings(BaseModel):
    """Last used export options, stored for the UI only."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    format: str = Field(default='png')  # png, svg, jpg
    quality: int = Field(default=100)
    scale: float = Field(default=1)
    transparent: bool = Field(default=False)
    width: float = Field(default=400)
    height: float = Field(default=400)
    background_color: str = Field(default='#ffffff', alias='backgroundColor')
    include_metadata: bool = Field(default=False, alias='includeMetadata')


class ProjectDocument(BaseModel):
    """
    Saved project.

    Example usage:
        # Save
        text = ProjectDocument.from_scene(scene, title="Acme").to_json()

        # Load
        scene = ProjectDocument.from_json(text).to_scene()
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=False, extra='ignore')

    logo_settings: LogoSettings = Field(default_factory=LogoSettings, alias='logoSettings')
    layers: list[Layer] = Field(default_factory=list)
    export_settings: ExportSettings = Field(default_factory=ExportSettings, alias='exportSettings')
    timestamp: int = Field(default_factory=lambda: int(time.time() * 1000))
    version: str = Field(default=VERSION)

    @classmethod
    def from_scene(
        cls,
        scene: Scene,
        title: str = 'My Logo',
        export_settings: Optional[ExportSettings] = None,
    ) -> 'ProjectDocument':
        """Build a document from a deep copy of ``scene``."""
        snapshot = scene.snapshot()
        return cls(
            logo_settings=LogoSettings.from_canvas(snapshot.canvas_settings, title),
            layers=snapshot.layers,
            export_settings=export_settings or ExportSettings(),
        )

    def to_scene(self) -> Scene:
        """Scene described by this document (independent of the document)."""
        return Scene(
            canvas_settings=self.logo_settings.to_canvas(),
            layers=[layer.model_copy(deep=True) for layer in self.layers],
        )

    def to_api_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode='json')

    def to_json(self) -> str:
        return json.dumps(self.to_api_dict(), indent=2)

    @classmethod
    def from_json(cls, text: str) -> 'ProjectDocument':
        """
        Parse a saved project.

        Raises:
            ProjectLoadError: If the text is not JSON or does not fit the model
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise ProjectLoadError(f"Project is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProjectLoadError(f"Project must be a JSON object, got {type(data).__name__}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ProjectLoadError(f"Project does not match the document layout: {e}") from e
