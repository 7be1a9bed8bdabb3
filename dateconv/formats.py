"""Format pattern catalog and pattern translation.

Patterns are plain ``strftime`` strings. Patterns written in the
``yyyy-MM-dd HH:mm:ss`` vocabulary are accepted everywhere a pattern is and
are translated by :func:`to_strftime` before they reach ``datetime``.
"""

from functools import lru_cache

TIMESTAMP_MICROS = "%Y-%m-%d %H:%M:%S.%f"
TIMESTAMP = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_MINUTES = "%Y-%m-%d %H:%M"
TIMESTAMP_HOURS = "%Y-%m-%d %H"
DATE = "%Y-%m-%d"
YEAR_MONTH = "%Y-%m"
YEAR = "%Y"
MONTH = "%m"
DAY = "%d"
YEAR_DAY = "%Y-%d"
HOUR = "%H"
TIME_MINUTES = "%H:%M"
TIME = "%H:%M:%S"
TIME_MICROS = "%H:%M:%S.%f"
DATE_SLASHED = "%Y/%m/%d"
DATE_DAY_FIRST = "%d/%m/%Y"

# Most specific first. MONTH, DAY, HOUR and YEAR_DAY are left out: each one
# collides with another entry on the same input.
DEFAULT_CANDIDATES: tuple[str, ...] = (
    TIMESTAMP_MICROS,
    TIMESTAMP,
    TIMESTAMP_MINUTES,
    TIMESTAMP_HOURS,
    DATE,
    DATE_SLASHED,
    DATE_DAY_FIRST,
    YEAR_MONTH,
    YEAR,
    TIME_MICROS,
    TIME,
    TIME_MINUTES,
)

_YEAR_DIRECTIVES = ("%Y", "%y", "%G")


def _letter_directive(letter: str, width: int) -> str:
    if letter == "y":
        return "%y" if width == 2 else "%Y"
    if letter == "M":
        if width <= 2:
            return "%m"
        return "%b" if width == 3 else "%B"
    if letter == "E":
        return "%a" if width <= 3 else "%A"
    if letter == "S":
        if width > 6:
            raise ValueError(
                f"Fraction field 'S' supports at most 6 digits, got {width}"
            )
        return "%f"
    if letter in ("Z", "X"):
        return "%z"
    directive = _SIMPLE_LETTERS.get(letter)
    if directive is None:
        raise ValueError(f"Unsupported pattern letter: '{letter}'")
    return directive


_SIMPLE_LETTERS = {
    "d": "%d",
    "H": "%H",
    "h": "%I",
    "m": "%M",
    "s": "%S",
    "a": "%p",
}


@lru_cache(maxsize=128)
def to_strftime(pattern: str) -> str:
    """Translate a ``yyyy-MM-dd`` style pattern into a ``strftime`` pattern.

    Patterns that already contain a ``%`` directive are returned unchanged.
    Text between single quotes is copied literally (``''`` is a quote).

    Example:
        >>> to_strftime("dd/MM/yyyy")
        '%d/%m/%Y'
        >>> to_strftime("yyyy-MM-dd'T'HH:mm")
        '%Y-%m-%dT%H:%M'

    Raises:
        ValueError: If the pattern uses a letter with no ``strftime`` equivalent
            or has an unterminated quote.
    """
    if "%" in pattern:
        return pattern

    out: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if pattern.startswith("''", i):
                out.append("'")
                i += 2
                continue
            i += 1
            while True:
                if i >= len(pattern):
                    raise ValueError(f"Unterminated quote in pattern: {pattern!r}")
                if pattern.startswith("''", i):
                    out.append("'")
                    i += 2
                elif pattern[i] == "'":
                    i += 1
                    break
                else:
                    out.append(pattern[i])
                    i += 1
        elif char.isascii() and char.isalpha():
            j = i
            while j < len(pattern) and pattern[j] == char:
                j += 1
            out.append(_letter_directive(char, j - i))
            i = j
        else:
            out.append(char)
            i += 1
    return "".join(out)


def has_year(pattern: str) -> bool:
    """True if the (translated) pattern carries a year directive."""
    unescaped = pattern.replace("%%", "")
    return any(directive in unescaped for directive in _YEAR_DIRECTIVES)
