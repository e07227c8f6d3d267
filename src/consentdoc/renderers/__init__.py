"""Renderers for parsed consent documents."""

from consentdoc.renderers.markup import MarkupRenderer, to_markup
from consentdoc.renderers.protocol import ResultRenderer

__all__ = ["MarkupRenderer", "ResultRenderer", "to_markup"]
