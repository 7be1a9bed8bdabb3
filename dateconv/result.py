"""Result type for parse operations."""

from dataclasses import dataclass

# Sentinel returned by numeric operations when the input cannot be parsed
FAILED = -1
# Sentinel returned by clock-format operations when the input cannot be parsed
FAILED_CLOCK = "00:00:00"


class ParseFailure(ValueError):
    """No candidate pattern could parse the input."""

    def __init__(self, value: object, patterns: tuple[str, ...]):
        self.value: object = value
        self.patterns: tuple[str, ...] = patterns
        tried = ", ".join(repr(p) for p in patterns) or "no patterns"
        super().__init__(f"Could not parse {value!r} with {tried}")


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse operation.

    Attributes:
        success: True if a pattern matched the input, False otherwise
        value: The parsed time point in epoch milliseconds if successful, None if failed
        error: The exception that occurred if failed, None if successful
        pattern: The pattern that matched, None if failed or matched leniently
    """

    success: bool
    value: int | None
    error: Exception | None
    pattern: str | None = None

    def or_sentinel(self) -> int:
        """Return the parsed value, or ``-1`` when parsing failed."""
        if self.success and self.value is not None:
            return self.value
        return FAILED
