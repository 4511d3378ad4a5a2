"""Layer animation settings and their SVG animation elements."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from logoforge.markup import element, format_number


class AnimationType(str, Enum):
    NONE = "none"
    FADE = "fade"
    SLIDE = "slide"
    ROTATE = "rotate"
    SCALE = "scale"
    BOUNCE = "bounce"
    PULSE = "pulse"


# type -> (element, animateTransform type, values)
_ANIMATIONS: dict[str, tuple[str, Optional[str], str]] = {
    'fade': ('animate', None, '0;1'),
    'slide': ('animateTransform', 'translate', '-100,0;0,0'),
    'rotate': ('animateTransform', 'rotate', '0;360'),
    'scale': ('animateTransform', 'scale', '0;1'),
    'pulse': ('animateTransform', 'scale', '1;1.1;1'),
    'bounce': ('animateTransform', 'translate', '0,0;0,-20;0,0'),
}


class AnimationSettings(BaseModel):
    """
    Animation of a layer. ``duration`` and ``delay`` are seconds.

    Serialization format:
    {
        "type": "none",
        "enabled": true,
        "duration": 1,
        "delay": 0,
        "iterations": 1,
        "direction": "normal",
        "easing": "ease"
    }
    """

    model_config = ConfigDict(populate_by_name=True, extra='ignore', use_enum_values=True)

    animation_type: AnimationType = Field(default=AnimationType.NONE, alias='type')
    enabled: bool = Field(default=True)
    duration: float = Field(default=1.0)
    delay: float = Field(default=0.0)
    iterations: Union[int, str] = Field(default=1)  # count or "infinite"
    direction: str = Field(default='normal')
    easing: str = Field(default='ease')
    custom_easing: Optional[str] = Field(default=None, alias='customEasing')

    def is_active(self) -> bool:
        return self.enabled and self.animation_type != AnimationType.NONE.value

    def repeat_count(self) -> str:
        """SVG ``repeatCount`` value; ``infinite`` and -1 map to ``indefinite``."""
        if self.iterations == 'infinite' or self.iterations == -1:
            return 'indefinite'
        return format_number(self.iterations or 1)

    def to_svg_animation(self) -> Optional[str]:
        """
        Generate the animation element placed inside the layer element.

        Returns:
            ``<animate>``/``<animateTransform>`` markup, or None when the
            animation is disabled or of an unknown type.
        """
        if not self.is_active():
            return None

        entry = _ANIMATIONS.get(getattr(self.animation_type, 'value', self.animation_type))
        if entry is None:
            return None

        tag, transform_type, values = entry
        pairs = [('attributeName', 'opacity' if tag == 'animate' else 'transform')]
        if transform_type is not None:
            pairs.append(('type', transform_type))
        if tag == 'animateTransform':
            # Keep the layer transform underneath the animated one
            pairs.append(('additive', 'sum'))
        pairs += [
            ('values', values),
            ('dur', f"{format_number(self.duration)}s"),
            ('begin', f"{format_number(self.delay)}s"),
            ('repeatCount', self.repeat_count()),
        ]
        return element(tag, pairs)
