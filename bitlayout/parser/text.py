"""Declaration text handling: comment stripping, body extraction and splitting."""

import re

from ..errors import MalformedDeclarationError

_RECORD_NAME = re.compile(r"struct\s+(\w+)\s*\{")


def normalize(text: str) -> str:
    """Strip C comments and collapse whitespace runs into single spaces.

    Comments are replaced by a space so tokens on either side never fuse.
    An unterminated block comment runs to the end of the text.
    """
    out: list[str] = []
    i = 0
    length = len(text)

    def space() -> None:
        if out and out[-1] != " ":
            out.append(" ")

    while i < length:
        c = text[i]
        nxt = text[i + 1] if i + 1 < length else ""

        if c == "/" and nxt == "/":
            end = text.find("\n", i + 2)
            i = length if end == -1 else end + 1
            space()
            continue

        if c == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            i = length if end == -1 else end + 2
            space()
            continue

        if c.isspace():
            space()
        else:
            out.append(c)
        i += 1

    return "".join(out).strip()


def record_name(normalized: str) -> str:
    """Return the name in `struct <name> {`, or an empty string."""
    match = _RECORD_NAME.search(normalized)
    return match.group(1) if match else ""


def record_body(normalized: str) -> str:
    """Return the text between the first `{` and the last `}`."""
    start = normalized.find("{")
    end = normalized.rfind("}")
    if start == -1 or end <= start:
        raise MalformedDeclarationError("Could not find struct body between {}")
    return normalized[start + 1 : end]


def split_statements(body: str) -> list[str]:
    """Split a struct body into field statements on top-level semicolons."""
    statements: list[str] = []
    current: list[str] = []
    depth = 0

    for c in body:
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1

        if c == ";" and depth == 0:
            statements.append("".join(current).strip())
            current.clear()
        else:
            current.append(c)

    statements.append("".join(current).strip())

    return [s for s in statements if s]
