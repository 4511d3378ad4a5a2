"""
Base class for visual effects.

Effects here are not pixel operations: each one describes itself as SVG
filter primitive markup that the compiler drops into a ``<filter>``.
Primitives are chained, every primitive reads the ``result`` of the one
before it (``SourceGraphic`` for the first).
"""

from abc import abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


class EffectSettings(BaseModel):
    """
    Base class for the toggleable effects of a layer.

    Subclasses must implement:
    - effect_type: Class variable naming the effect, also used as its
      filter primitive result name
    - to_svg_primitive(): Returns the filter primitive markup, or None if
      the effect is not part of the filter chain
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
    )

    # Class variables (not serialized)
    effect_type: ClassVar[str] = "base"

    enabled: bool = Field(default=False)

    def is_active(self) -> bool:
        """Check if the effect contributes to the output."""
        return self.enabled

    @abstractmethod
    def to_svg_primitive(self, source: str, result: str) -> Optional[str]:
        """
        Generate the filter primitive(s) for this effect.

        Args:
            source: Name of the input (``SourceGraphic`` or a prior result)
            result: Name under which the last primitive stores its output

        Returns:
            Primitive markup, or None if the effect is drawn elsewhere
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(enabled={self.enabled})"
