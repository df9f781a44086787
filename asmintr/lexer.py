from __future__ import annotations

from dataclasses import dataclass

COMMENT_CHAR = ";"


@dataclass(frozen=True, slots=True)
class SourceLine:
    lineno: int
    text: str
    mnemonic: str | None
    operands: tuple[str, ...]

    @property
    def is_blank(self) -> bool:
        return self.mnemonic is None

    @property
    def is_label(self) -> bool:
        return self.mnemonic is not None and self.mnemonic.endswith(":")


def strip_comment(raw: str) -> str:
    pos = raw.find(COMMENT_CHAR)
    if pos >= 0:
        raw = raw[:pos]
    return raw.strip()


def split_operands(rest: str) -> tuple[str, ...]:
    rest = rest.strip()
    if not rest:
        return ()
    return tuple(part.strip() for part in rest.split(","))


def split_line(raw: str, *, lineno: int = 1) -> SourceLine:
    text = strip_comment(raw)
    if not text:
        return SourceLine(lineno=lineno, text="", mnemonic=None, operands=())
    mnemonic = text.split(maxsplit=1)[0]
    # The cleaned text always starts with the mnemonic, so dropping its length removes it once.
    return SourceLine(
        lineno=lineno,
        text=text,
        mnemonic=mnemonic,
        operands=split_operands(text[len(mnemonic) :]),
    )


def source_lines(src: str) -> list[str]:
    """Split on `\\n` only, dropping one trailing `\\r` per line.

    A trailing newline does not start another (empty) line.
    """
    if not src:
        return []
    pieces = src.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [p[:-1] if p.endswith("\r") else p for p in pieces]


def tokenize(src: str) -> list[SourceLine]:
    return [split_line(raw, lineno=i) for i, raw in enumerate(source_lines(src), start=1)]
