from parenpp.core.buffer import OutputBuffer
from parenpp.core.engine import DEFAULT_WIDTH, prettyprint
from parenpp.core.layout import fits_inline, remaining_width
from parenpp.core.renderer import TreeRenderer

__all__ = ["DEFAULT_WIDTH", "OutputBuffer", "TreeRenderer", "fits_inline", "prettyprint", "remaining_width"]
