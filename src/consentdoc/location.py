"""Source location tracking for parse diagnostics.

Provides SourceLocation for reporting where in a consent document a parse
error occurred. Locations are diagnostic only; they are never stored in
the parsed document model.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class SourceLocation:
    """A position in consent markup, as a line and column.

    Both coordinates are 0-indexed. Columns count Unicode code points
    from the start of the line. Locations order by line, then column.

    Attributes:
        line: Line number (0-indexed)
        column: Offset within the line (0-indexed)

    Examples:
        >>> SourceLocation(line=2, column=4)
        SourceLocation(line=2, column=4)
        >>> SourceLocation(0, 9) < SourceLocation(1, 0)
        True

    """

    line: int
    column: int

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.line}:{self.column}"

    @classmethod
    def zero(cls) -> SourceLocation:
        """Location of the very first character of the input."""
        return cls(line=0, column=0)

    @classmethod
    def from_offset(cls, source: str, offset: int) -> SourceLocation:
        """Compute the location of ``offset`` within ``source``.

        Counts line breaks before the offset, treating ``\\r\\n`` and a lone
        ``\\r`` as a single break. O(offset), so only use on error paths.

        Args:
            source: Full source text
            offset: Code point offset into source

        Returns:
            SourceLocation for the offset
        """
        prefix = source[:offset].replace("\r\n", "\n").replace("\r", "\n")
        last_newline = prefix.rfind("\n")
        return cls(line=prefix.count("\n"), column=len(prefix) - last_newline - 1)
