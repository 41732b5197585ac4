"""Shared core type aliases used across contracts, mapper, and ports."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple, Type, Union

PositionalParams = Sequence[Any]
QueryParams = Union[PositionalParams, None]

RowMapping = Mapping[str, Any]
Rows = List[RowMapping]
MaybeRow = Optional[RowMapping]

TypedValue = Tuple[Any, Type[Any]]
