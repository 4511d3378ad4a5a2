"""
Small helpers for writing SVG markup by hand.

Output must be byte-identical for identical input, so numbers are
formatted through a single function and attribute order is the order
of the pairs given.
"""

from enum import Enum
from html import escape
from typing import Any, Iterable, Optional, Tuple, Union

from logoforge.config import settings

AttrPairs = Iterable[Tuple[str, Any]]


def format_number(value: Any, precision: Optional[int] = None) -> str:
    """
    Format a number for an SVG attribute.

    Integral values drop the fractional part (``50.0`` -> ``50``), other
    floats are rounded to ``precision`` decimals with trailing zeros
    stripped. Non-numeric values are passed through as strings.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')):
            return '0'
        if value.is_integer():
            return str(int(value))
        digits = settings.NUMBER_PRECISION if precision is None else precision
        text = f"{value:.{digits}f}".rstrip('0').rstrip('.')
        return '0' if text in ('', '-0') else text
    return str(value)


def format_attrs(pairs: AttrPairs) -> str:
    """Join ``(name, value)`` pairs into an attribute string, skipping ``None`` values."""
    parts = []
    for name, value in pairs:
        if value is None:
            continue
        parts.append(f'{name}="{escape(format_number(value), quote=True)}"')
    return ' '.join(parts)


def element(tag: str, pairs: AttrPairs, children: Union[str, None] = None) -> str:
    """Build a single element; self-closing when there are no children."""
    attrs = format_attrs(pairs)
    opening = f'<{tag} {attrs}' if attrs else f'<{tag}'
    if not children:
        return f'{opening}/>'
    return f'{opening}>{children}</{tag}>'


def escape_text(text: Any) -> str:
    """Escape character data for use between tags."""
    return escape('' if text is None else str(text), quote=False)
