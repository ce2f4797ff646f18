import re
import unicodedata

# Symbols spelled out instead of dropped
_CHAR_MAP = {
    "$": "dollar",
    "%": "percent",
    "&": "and",
    "<": "less",
    ">": "greater",
    "|": "or",
}

_NON_ALNUM = re.compile(r"[^A-Za-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def slugify(value: str) -> str:
    """Lower-case, hyphenated, ASCII-only slug.

    >>> slugify("Coimbatore airport records 11% rise in passenger traffic")
    'coimbatore-airport-records-11percent-rise-in-passenger-traffic'
    """

    text = "".join(_CHAR_MAP.get(ch, ch) for ch in (value or ""))
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = _NON_ALNUM.sub("", text).strip()
    text = _SEPARATORS.sub("-", text).strip("-")
    return text.lower()
