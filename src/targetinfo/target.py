# targetinfo - compiler target triple decomposition
# Licensed under MIT

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Arch:
    """
    The closed set of architecture families a triple can decompose to.
    These are the coarse values used by conditional compilation, not the
    full architecture names found in triples.
    """
    aarch64 = 'aarch64'  # arm64, arm64e, arm64_32, aarch64_be, ...
    amdgpu = 'amdgpu'  # AMD GCN
    arm = 'arm'  # arm*, thumb*
    arm64ec = 'arm64ec'  # ARM64 emulation compatible (Windows)
    avr = 'avr'
    bpf = 'bpf'  # bpfeb, bpfel
    clever = 'clever'
    csky = 'csky'
    hexagon = 'hexagon'
    loongarch32 = 'loongarch32'
    loongarch64 = 'loongarch64'
    m68k = 'm68k'
    mips = 'mips'  # mips, mipsel
    mips32r6 = 'mips32r6'  # mipsisa32r6, mipsisa32r6el
    mips64 = 'mips64'  # mips64, mips64el
    mips64r6 = 'mips64r6'  # mipsisa64r6, mipsisa64r6el
    msp430 = 'msp430'
    nvptx = 'nvptx'
    nvptx64 = 'nvptx64'
    powerpc = 'powerpc'  # powerpc, ppc
    powerpc64 = 'powerpc64'  # powerpc64, powerpc64le, ppc64
    pulley32 = 'pulley32'
    pulley64 = 'pulley64'
    r600 = 'r600'
    riscv32 = 'riscv32'  # riscv32i, riscv32imac, riscv32e, ...
    riscv64 = 'riscv64'  # riscv64gc, riscv64imac, ...
    s390x = 's390x'
    sparc = 'sparc'
    sparc64 = 'sparc64'  # sparc64, sparcv9
    wasm32 = 'wasm32'  # wasm32, wasm32v1, asmjs
    wasm64 = 'wasm64'
    x86 = 'x86'  # i386, i586, i686
    x86_64 = 'x86_64'  # x86_64, x86_64h
    xtensa = 'xtensa'

    @classmethod
    def families(cls) -> list[str]:
        return sorted(value for name, value in vars(cls).items()
                      if not name.startswith('_') and isinstance(value, str))


class ErrorKind(Enum):
    """Enum for the ways a target can fail to resolve."""
    EnvVarNotFound = auto()  # a required environment variable is missing
    InvalidTarget = auto()  # malformed triple
    UnknownTarget = auto()  # well-formed, but not in any table


class TargetError(ValueError):
    """
    Raised when a target triple cannot be decomposed or resolved.
    `target` is the offending triple, or the variable name when the
    failure is a missing environment variable.
    """
    def __init__(self, kind: ErrorKind, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.target = target

    def clone(self) -> 'TargetError':
        return TargetError(self.kind, self.message, self.target)

    def __eq__(self, other):
        if not isinstance(other, TargetError):
            return NotImplemented
        return (self.kind, self.message, self.target) == (other.kind, other.message, other.target)

    def __hash__(self):
        return hash((self.kind, self.message, self.target))

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"TargetError({self.kind.name}, {self.message!r})"


@dataclass(frozen=True)
class TargetInfo:
    """
    A fully normalized target triple.

    full_arch: the architecture exactly as written in the triple, including
               the subarchitecture (e.g. 'armv7s', 'riscv64gc').
    arch:      the architecture family, one of `Arch`.
    vendor:    'unknown' when the triple has no vendor.
    os:        'none' on bare-metal targets.
    env:       environment on top of the OS, '' when not applicable.
    abi:       ABI on top of the OS/environment, '' when not applicable.
    """
    full_arch: str
    arch: str
    vendor: str = 'unknown'
    os: str = 'none'
    env: str = ''
    abi: str = ''

    def fields(self) -> dict[str, str]:
        return {
            'full_arch': self.full_arch,
            'arch': self.arch,
            'vendor': self.vendor,
            'os': self.os,
            'env': self.env,
            'abi': self.abi,
        }
