"""Literal node definitions."""

from __future__ import annotations

from typing import Optional, Union

from .expressions import Expr
from .types import DecafType


class Literal(Expr):
    """Integer or boolean literal: 42, 0x1F, true, false.

    The type tag is taken from the value when not given explicitly.
    """

    def __init__(
        self,
        value: Union[int, bool],
        literal_type: Optional[DecafType] = None,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value
        if literal_type is None:
            # bool is a subclass of int, so test it first
            literal_type = DecafType.BOOL if isinstance(value, bool) else DecafType.INT
        self.literal_type = literal_type
