"""Go source header parser using Tree-sitter.

Only the file header is inspected: leading comments, the package clause and
the import declarations. Everything after the last import declaration is
ignored, so edits to function bodies never change the extracted result.
"""

from pathlib import Path
from typing import Any

import tree_sitter_go as tsgo
from tree_sitter import Language, Parser

from gochef.core.exceptions.errors import FileIOError, ParseError
from gochef.core.logger.logger import get_logger
from gochef.core.utils.go_literals import unquote
from gochef.models.header import FileImports, ImportSpec

logger = get_logger(__name__)

DEFAULT_CONSTRAINT_PREFIX = "//go:build "

# Node types that may appear in a file header
COMMENT = "comment"
PACKAGE_CLAUSE = "package_clause"
IMPORT_DECLARATION = "import_declaration"
STRING_LITERALS = ("interpreted_string_literal", "raw_string_literal")
HEADER_NODES = (COMMENT, PACKAGE_CLAUSE, IMPORT_DECLARATION)
HEADER_KEYWORDS = (b"package", b"import")


class GoHeaderParser:
    """Extracts import paths and the build constraint of Go files."""

    def __init__(self, constraint_prefix: str = DEFAULT_CONSTRAINT_PREFIX) -> None:
        """Initialize the header parser.

        Args:
            constraint_prefix: Comment prefix introducing a build constraint.
        """
        self.constraint_prefix = constraint_prefix
        self._language: Language | None = None
        self._parser: Parser | None = None

    def _init_parser(self) -> None:
        """Initialize the Tree-sitter Go parser."""
        self._language = Language(tsgo.language())
        self._parser = Parser(self._language)

    def _parse_tree(self, content: bytes) -> Any:
        if self._parser is None:
            self._init_parser()
        return self._parser.parse(content)

    def _get_node_text(self, content: bytes, node: Any) -> str:
        return content[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _get_node_line(self, node: Any) -> int:
        return node.start_point[0] + 1

    def _starts_header(self, node: Any, content: bytes) -> bool:
        """Return True if an error node begins with a package or import keyword."""
        return content[node.start_byte : node.end_byte].lstrip().startswith(HEADER_KEYWORDS)

    def parse_file(self, file_path: Path, display_path: str | None = None) -> FileImports:
        """Read and parse a Go source file.

        Args:
            file_path: Path to the source file.
            display_path: Path reported in results and errors. Defaults to file_path.

        Returns:
            Parsed header information.

        Raises:
            FileIOError: If the file cannot be read.
            ParseError: If the header is malformed.
        """
        shown = display_path or str(file_path)
        try:
            content = Path(file_path).read_bytes()
        except OSError as e:
            raise FileIOError(
                f"Could not read source file: {shown}",
                path=shown,
                details={"error": e.strerror or str(e)},
            ) from e
        return self.parse(content, shown)

    def parse(self, content: bytes | str, file_path: str) -> FileImports:
        """Parse the header of Go source code.

        Args:
            content: Source code.
            file_path: Path of the file, used in results and errors.

        Returns:
            Parsed header information.

        Raises:
            ParseError: If the header is not syntactically well-formed.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")

        root = self._parse_tree(content).root_node
        if root.type != "source_file":
            raise ParseError("syntax error in file header", file_path=file_path, line=1)

        package: str | None = None
        comments: list[Any] = []
        imports: list[ImportSpec] = []

        for child in root.children:
            if not child.is_named:
                # statement terminators
                continue

            if child.type == "ERROR":
                # errors after the header are not ours to report
                if package is None or self._starts_header(child, content):
                    raise ParseError(
                        "syntax error in file header",
                        file_path=file_path,
                        line=self._get_node_line(child),
                    )
                break

            if child.type not in HEADER_NODES:
                break
            if child.type == PACKAGE_CLAUSE and package is not None:
                break
            if child.type == IMPORT_DECLARATION and package is None:
                break

            if child.is_missing or child.has_error:
                raise ParseError(
                    "syntax error in file header",
                    file_path=file_path,
                    line=self._get_node_line(child),
                )

            if child.type == COMMENT:
                comments.append(child)
            elif child.type == PACKAGE_CLAUSE:
                package = self._extract_package(child, content)
            else:
                imports.extend(
                    self._extract_import_declaration(child, content, file_path, comments)
                )

        if package is None:
            raise ParseError("expected 'package' clause", file_path=file_path)

        build_constraints = self._extract_build_constraints(comments, content)
        logger.debug(
            f"Parsed {file_path}: package {package}, {len(imports)} imports"
            + (f", constraint {build_constraints!r}" if build_constraints else "")
        )

        return FileImports(
            file_path=file_path,
            package=package,
            imports=imports,
            build_constraints=build_constraints,
        )

    def _extract_package(self, node: Any, content: bytes) -> str:
        """Extract the package name from a package clause."""
        for child in node.children:
            if child.type == "package_identifier":
                return self._get_node_text(content, child)
        return ""

    def _extract_import_declaration(
        self, node: Any, content: bytes, file_path: str, comments: list[Any]
    ) -> list[ImportSpec]:
        """Extract imports from an import declaration.

        Comments inside a parenthesized import list are appended to comments.
        """
        imports: list[ImportSpec] = []

        for child in node.children:
            if child.type == "import_spec":
                # Single import: import "fmt"
                imports.append(self._extract_import_spec(child, content, file_path))
            elif child.type == "import_spec_list":
                # Multiple imports: import ("fmt"; "os")
                for spec in child.children:
                    if spec.type == "import_spec":
                        imports.append(self._extract_import_spec(spec, content, file_path))
                    elif spec.type == COMMENT:
                        comments.append(spec)

        return imports

    def _extract_import_spec(self, node: Any, content: bytes, file_path: str) -> ImportSpec:
        """Extract a single import spec."""
        literal: Any = None
        alias: str | None = None

        for child in node.children:
            if child.type in STRING_LITERALS:
                literal = child
            elif child.type in ("package_identifier", "blank_identifier", "dot"):
                alias = self._get_node_text(content, child)

        line = self._get_node_line(node)
        if literal is None:
            raise ParseError("import spec without path", file_path=file_path, line=line)

        text = self._get_node_text(content, literal)
        try:
            path = unquote(text)
        except ValueError as e:
            raise ParseError(
                f"failed to unquote {text}: {e}",
                file_path=file_path,
                line=line,
            ) from e

        return ImportSpec(path=path, alias=alias, line=line)

    def _extract_build_constraints(self, comments: list[Any], content: bytes) -> str:
        """Return the expression of the first build constraint comment.

        https://pkg.go.dev/cmd/go#hdr-Build_constraints
        """
        for node in sorted(comments, key=lambda n: n.start_byte):
            text = self._get_node_text(content, node).rstrip("\r")
            if text.startswith(self.constraint_prefix):
                return text[len(self.constraint_prefix) :]
        return ""
