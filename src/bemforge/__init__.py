"""bemforge: prefixed custom properties and BEM selectors for CSS authoring."""

from __future__ import annotations

__version__ = "0.1.0"

from bemforge.composer import Composer  # noqa: E402
from bemforge.config import ComposerConfig  # noqa: E402
from bemforge.errors import (  # noqa: E402
    BemforgeError,
    SelectorContextError,
    SelectorUnificationError,
)
from bemforge.model import Declaration, Rule, SelectorContext, Stylesheet  # noqa: E402
from bemforge.render import render_css  # noqa: E402
from bemforge.selector import unify  # noqa: E402

__all__ = [
    "__version__",
    "Composer",
    "ComposerConfig",
    "BemforgeError",
    "SelectorContextError",
    "SelectorUnificationError",
    "Declaration",
    "Rule",
    "SelectorContext",
    "Stylesheet",
    "render_css",
    "unify",
]
