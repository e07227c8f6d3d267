"""ResultRenderer protocol: stable interface for document renderers.

Any renderer that implements ``render(result) -> str`` conforms to this
protocol. The built-in ``MarkupRenderer`` is the reference implementation.

Example:
    from consentdoc.renderers.protocol import ResultRenderer

    def render_form(renderer: ResultRenderer, result: ParseResult) -> str:
        return renderer.render(result)

"""

from typing import Protocol

from consentdoc.nodes import ParseResult


class ResultRenderer(Protocol):
    """Protocol for ParseResult renderers."""

    def render(self, result: ParseResult) -> str:
        """Render a ParseResult to a string.

        Args:
            result: The parsed document to render.

        Returns:
            Rendered string output.

        """
        ...
