"""
Filter descriptions.

A FilterDescription is the ordered list of primitives resolved from a
layer's effects. The order is fixed (shadow, glow, blur, color
adjustment) because each primitive reads the output of the previous
one; reordering changes the picture.
"""

from dataclasses import dataclass, field

from logoforge.markup import element


@dataclass
class FilterPrimitive:
    """One stage of a filter chain (may span several SVG elements)."""
    name: str  # 'shadow', 'glow', 'blur' or 'adjust'
    markup: str
    result: str


@dataclass
class FilterDescription:
    """Ordered filter primitives of a single layer."""
    primitives: list[FilterPrimitive] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.primitives]

    def __len__(self) -> int:
        return len(self.primitives)

    def to_svg_filter(self, filter_id: str) -> str:
        """
        Generate the ``<filter>`` element.

        Args:
            filter_id: Unique ID for the filter element

        Returns:
            SVG filter element as string
        """
        body = ''.join(p.markup for p in self.primitives)
        return element('filter', [
            ('id', filter_id),
            ('x', '-50%'),
            ('y', '-50%'),
            ('width', '200%'),
            ('height', '200%'),
        ], body)
