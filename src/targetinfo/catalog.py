# targetinfo - compiler target triple decomposition
# Licensed under MIT

"""
catalog.py - Lookups into the generated target list.

The catalogue is reference data: `decompose` never consults it.
"""

from typing import Optional

from .generated import LIST
from .target import TargetInfo

_BY_TRIPLE = {triple: (info, features) for triple, info, features in LIST}


def lookup(triple: str) -> Optional[tuple[TargetInfo, str]]:
    """The catalogued (TargetInfo, features) for `triple`, or None."""
    return _BY_TRIPLE.get(triple)


def triples() -> list[str]:
    return [triple for triple, _info, _features in LIST]


def features(triple: str) -> list[str]:
    entry = _BY_TRIPLE.get(triple)
    if entry is None or not entry[1]:
        return []
    return entry[1].split(',')
