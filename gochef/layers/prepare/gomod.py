"""Module path extraction from go.mod files."""

import re

from gochef.core.exceptions.errors import ParseError
from gochef.core.utils.go_literals import unquote

# A verb followed by an opening parenthesis starts a block: require (
BLOCK_START_PATTERN = re.compile(r"^(?P<verb>[A-Za-z]+)\s*\($")

MODULE_VERB = "module"


def _strip_comment(line: str) -> str:
    """Remove a trailing // comment that is not inside a quoted string."""
    in_quote: str | None = None
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quote:
            if ch == "\\" and in_quote == '"':
                i += 2
                continue
            if ch == in_quote:
                in_quote = None
        elif ch in ('"', "`"):
            in_quote = ch
        elif line.startswith("//", i):
            return line[:i]
        i += 1
    return line


def _parse_module_token(rest: str, file_path: str, lineno: int) -> str:
    """Parse the argument of a module directive."""
    tokens = rest.split()
    if len(tokens) != 1:
        raise ParseError(
            "usage: module module/path",
            file_path=file_path,
            line=lineno,
        )

    token = tokens[0]
    if token[0] in ('"', "`"):
        try:
            token = unquote(token)
        except ValueError as e:
            raise ParseError(
                f"invalid quoted module path: {e}",
                file_path=file_path,
                line=lineno,
            ) from e

    if not token:
        raise ParseError("empty module path", file_path=file_path, line=lineno)
    return token


def read_module_path(content: str, file_path: str = "go.mod") -> str:
    """Extract the module path declared in a go.mod file.

    Args:
        content: Raw go.mod contents.
        file_path: Path used in error messages.

    Returns:
        The module path, e.g. "example.com/app".

    Raises:
        ParseError: If the module directive is missing, repeated or malformed,
            or a directive block is not terminated.
    """
    module_path: str | None = None
    block_verb: str | None = None
    block_line = 0

    def set_module(rest: str, lineno: int) -> None:
        nonlocal module_path
        if module_path is not None:
            raise ParseError("repeated module statement", file_path=file_path, line=lineno)
        module_path = _parse_module_token(rest, file_path, lineno)

    for lineno, raw_line in enumerate(content.splitlines(), start=1):
        line = _strip_comment(raw_line).strip()
        if not line:
            continue

        if block_verb is not None:
            if line == ")":
                block_verb = None
            elif block_verb == MODULE_VERB:
                set_module(line, lineno)
            continue

        block = BLOCK_START_PATTERN.match(line)
        if block:
            block_verb = block.group("verb")
            block_line = lineno
            continue

        verb, _, rest = line.replace("\t", " ").partition(" ")
        if verb == MODULE_VERB:
            set_module(rest, lineno)

    if block_verb is not None:
        raise ParseError(
            f"unterminated {block_verb} block",
            file_path=file_path,
            line=block_line,
        )
    if module_path is None:
        raise ParseError("no module directive found", file_path=file_path)
    return module_path
