"""Reading FEN and EPD positions from files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_FEN_FIELD_COUNT = 4


@dataclass(frozen=True)
class Epd:
    """An Extended Position Description: a position and its best move."""

    fen: str = ""
    best_move: str = ""


def parse_epd(line: str) -> Epd:
    """Parse one EPD line: four position fields, then operations such as ``bm``."""
    tokens = iter(line.split())
    fen_fields: list[str] = []
    best_move = ""
    for token in tokens:
        if len(fen_fields) < _FEN_FIELD_COUNT:
            fen_fields.append(token)
        elif token == "bm":
            operand = next(tokens, None)
            if operand is None:
                raise ValueError("bm operation without a move")
            best_move = operand[:-1]  # drop the terminating ';'
    return Epd(fen=" ".join(fen_fields), best_move=best_move)


def _read_first_line(path: PathLike) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            line = handle.readline()
    except OSError as exc:
        raise OSError(f"Unable to open file: {os.fspath(path)}") from exc
    if not line:
        raise ValueError(f"Unable to read from file: {os.fspath(path)}")
    return line[:-1] if line.endswith("\n") else line


def load_fen_from_file(path: PathLike) -> str:
    """The first line of ``path``, holding a single FEN."""
    return _read_first_line(path)


def load_epd_from_file(path: PathLike) -> Epd:
    """The EPD on the first line of ``path``."""
    return parse_epd(_read_first_line(path))