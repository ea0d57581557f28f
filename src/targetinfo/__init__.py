# targetinfo - compiler target triple decomposition
# Licensed under MIT

from .llvm import llvm_target
from .parser import decompose
from .resolver import TargetInfoParser
from .target import Arch, ErrorKind, TargetError, TargetInfo

__version__ = "0.1.0"

__all__ = [
    "Arch",
    "ErrorKind",
    "TargetError",
    "TargetInfo",
    "TargetInfoParser",
    "decompose",
    "llvm_target",
]
