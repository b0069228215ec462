"""
Literal and comment text helpers.
"""

import re

DOC_COMMENT_PREFIX = "/**"

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_LINE_CONTINUATIONS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _unescape(match: re.Match) -> str:
    esc = match.group(1)
    head = esc[0]

    if esc.startswith("u{"):
        return chr(int(esc[2:-1], 16))
    if head == "u" and len(esc) == 5:
        return chr(int(esc[1:], 16))
    if head == "x" and len(esc) == 3:
        return chr(int(esc[1:], 16))
    if head in "01234567":
        return chr(int(esc, 8))
    if esc in _LINE_CONTINUATIONS:
        return ""
    return _SIMPLE_ESCAPES.get(esc, esc)


def decode_escapes(text: str) -> str:
    """
    Decode JavaScript escape sequences.

    Surrogate pairs written as two \\u escapes are joined into one
    code point; lone surrogates are kept as-is.
    """
    if "\\" not in text:
        return text
    decoded = _ESCAPE_RE.sub(_unescape, text)
    if _SURROGATE_RE.search(decoded):
        decoded = decoded.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")
    return decoded


def string_value(raw: str) -> str:
    """Value of a quoted string literal"""
    return decode_escapes(raw[1:-1])


def template_cooked(raw: str) -> str:
    """Cooked value of a template chunk (CRLF normalized to LF)"""
    return decode_escapes(raw.replace("\r\n", "\n").replace("\r", "\n"))


def number_value(raw: str) -> int | float:
    """
    Numeric value of a number literal.

    Integral literals (decimal, hex, octal, binary, BigInt) give int;
    anything with a fraction or exponent gives float.
    """
    text = raw.replace("_", "")
    lower = text.lower()

    if lower.endswith("n"):
        return int(text[:-1], 0) if len(text) > 2 and text[0] == "0" else int(text[:-1])
    if lower.startswith(("0x", "0o", "0b")):
        return int(text, 0)
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        # legacy octal (017), or decimal when a digit is 8/9 (018)
        return int(text, 8) if all(c in "01234567" for c in text) else int(text, 10)
    if "." in text or "e" in lower:
        return float(text)
    return int(text)


def is_doc_comment(raw: str) -> bool:
    """True for /** ... */ comments (but not the empty /**/)"""
    return raw.startswith(DOC_COMMENT_PREFIX) and raw != "/**/"


def comment_value(raw: str) -> str:
    """Comment text with delimiters stripped"""
    if raw.startswith("/*"):
        body = raw[2:]
        return body[:-2] if body.endswith("*/") else body
    if raw.startswith("//"):
        return raw[2:]
    return raw
