"""Word splitting and identifier case conversion.

These helpers sit beside the matching engine rather than inside it; only
:func:`suggest_case_style` reaches into the ranking code.

Example:
    >>> from fuzzyrank.casing import split_words, to_snake_case, to_camel_case
    >>> split_words("parseHTTPResponse_v2")
    ['parse', 'HTTP', 'Response', 'v2']
    >>> to_snake_case("parseHTTPResponse")
    'parse_http_response'
    >>> to_camel_case("user-account id")
    'userAccountId'
"""

from typing import Iterable, List, Optional, Union

from fuzzyrank._utils import normalize_case_style
from fuzzyrank.enums import CaseStyle
from fuzzyrank.options import MatchingOptions
from fuzzyrank.ranking import closest_string


def split_words(text: str) -> List[str]:
    """Split text into words.

    Boundaries are any non-alphanumeric character, a lowercase letter or
    digit followed by an uppercase letter (``fooBar``), and the last capital
    of an uppercase run that is followed by a lowercase letter
    (``HTTPServer`` -> ``HTTP``, ``Server``).
    """
    words: List[str] = []
    current: List[str] = []

    for i, ch in enumerate(text):
        if not ch.isalnum():
            if current:
                words.append("".join(current))
                current = []
            continue
        if current and ch.isupper():
            prev = current[-1]
            next_is_lower = i + 1 < len(text) and text[i + 1].islower()
            if not prev.isupper() or next_is_lower:
                words.append("".join(current))
                current = []
        current.append(ch)

    if current:
        words.append("".join(current))
    return words


def lowercase(text: str) -> str:
    return text.lower()


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return text[:1].upper() + text[1:]


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_title(w) for w in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(_title(w) for w in split_words(text))


def to_snake_case(text: str) -> str:
    return "_".join(w.lower() for w in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(w.lower() for w in split_words(text))


_CONVERTERS = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.PASCAL: to_pascal_case,
    CaseStyle.SNAKE: to_snake_case,
    CaseStyle.KEBAB: to_kebab_case,
}


def convert_case(text: str, style: Union[str, CaseStyle]) -> str:
    """Convert text to the given case style.

    Raises:
        AlgorithmError: If ``style`` is not a known case style.
    """
    return _CONVERTERS[normalize_case_style(style)](text)


def suggest_case_style(
    name: str,
    styles: Optional[Iterable[Union[str, CaseStyle]]] = None,
) -> CaseStyle:
    """Guess which case style a name is already written in.

    Each style's rendering of ``name`` is compared with ``name`` itself
    (case-sensitively) and the style whose rendering is closest wins. Ties
    go to the earlier style in ``styles``.

    Example:
        >>> suggest_case_style("user_id")
        <CaseStyle.SNAKE: 'snake'>
        >>> suggest_case_style("UserId")
        <CaseStyle.PASCAL: 'pascal'>
    """
    candidates = [normalize_case_style(s) for s in (styles or CaseStyle)]
    renderings = [convert_case(name, style) for style in candidates]
    best = closest_string(name, renderings, MatchingOptions(case_sensitive=True))
    return candidates[renderings.index(best)]


__all__ = [
    "split_words",
    "lowercase",
    "capitalize",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_kebab_case",
    "convert_case",
    "suggest_case_style",
]
