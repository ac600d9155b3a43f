"""Utilities."""

from typing import Dict, Iterable, Optional, Sequence, Union

from pyjoplin.exceptions import InvalidFieldPairsError


def join_fields(fields: Optional[Union[str, Iterable[str]]]) -> str:
    """Turn a field list into the comma separated ``fields`` query value."""
    if fields is None:
        return ""
    if isinstance(fields, str):
        return fields
    return ",".join(f for f in fields if f)


def pairs_to_mapping(values: Sequence[str]) -> Dict[str, str]:
    """
    Fold ``[field1, value1, field2, value2, ...]`` into a mapping.

    Later pairs win when a field name repeats. A trailing field without a
    value is rejected.
    """
    if len(values) % 2:
        raise InvalidFieldPairsError(
            f"Field {values[-1]!r} has no value; expected field/value pairs"
        )
    mapping: Dict[str, str] = {}
    for i in range(0, len(values), 2):
        mapping[values[i]] = values[i + 1]
    return mapping
