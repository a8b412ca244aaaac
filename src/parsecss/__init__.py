"""Split CSS stylesheets into font-face, keyframes, global and per-class css."""

from .errors import CSSParseError
from .parse import parse_css

__version__ = '0.1.0'

__all__ = ['parse_css', 'CSSParseError']
