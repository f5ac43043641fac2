"""Error types with formatted source context."""

from __future__ import annotations

from jsxtree.ast import Position


class TranslationError(Exception):
    """Base class for every failure raised while translating markup."""

    def __init__(self, message: str, position: Position | None = None) -> None:
        self.message = message
        self.position = position
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (line {self.position.line}, column {self.position.column})"

    def format(self, source: str = "", filename: str = "<markup>") -> str:
        if self.position is None:
            return f"error: {self.message}\n  --> {filename}"

        lines = source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the tag opener, at least one char
        underline_len = max(1, min(2, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class ParseFailure(TranslationError):
    """The markup parser could not interpret the fragment."""


class MarkdownConversionFailure(TranslationError):
    """The Markdown converter failed."""


class UnsupportedTagError(TranslationError):
    """Tag outside the supported vocabulary."""

    def __init__(self, tag: str, position: Position | None = None) -> None:
        self.tag = tag
        super().__init__(f"cannot handle element <{tag}>", position)


class UnsupportedAttributeError(TranslationError):
    """Attribute key not accepted by its tag."""

    def __init__(self, tag: str, attribute: str, position: Position | None = None) -> None:
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"don't know how to handle <{tag}> attribute '{attribute}'", position)


class UnsupportedStyleDeclaration(TranslationError):
    """Malformed style declaration, or a style property outside the whitelist."""

    def __init__(
        self,
        message: str,
        value: str,
        tag: str | None = None,
        position: Position | None = None,
    ) -> None:
        self.value = value
        self.tag = tag
        super().__init__(message, position)


class CardinalityError(TranslationError):
    """A single-root translation produced zero or several roots."""

    def __init__(self, source: str, count: int) -> None:
        self.source = source
        self.count = count
        super().__init__(f"expected single element result from {source!r}; got {count}")
