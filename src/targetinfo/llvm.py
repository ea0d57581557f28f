# targetinfo - compiler target triple decomposition
# Licensed under MIT

"""
llvm.py - Re-encodes a `TargetInfo` as the triple LLVM/Clang expects.

The two toolchains don't agree on target naming, so the LLVM triple is built
from the decomposed fields instead of being derived from the original string.
See https://clang.llvm.org/docs/CrossCompilation.html#target-triple
"""

import re
from typing import Optional

from .target import Arch, TargetInfo

# (full_arch pattern, required vendor or None, LLVM arch)
ARCH_RULES = [
    (r'riscv32.*', None, 'riscv32'),
    (r'riscv64.*', None, 'riscv64'),
    (r'aarch64', 'apple', 'arm64'),
    (r'armv7', 'sony', 'thumbv7a'),
]

# (vendor or None, os or None, arch or None, LLVM vendor); '' drops the segment
VENDOR_RULES = [
    ('kmc', None, None, 'unknown'),
    ('nintendo', None, None, 'unknown'),
    ('unknown', 'android', None, 'linux'),
    ('uwp', None, None, 'pc'),
    ('espressif', None, None, ''),
    (None, None, Arch.msp430, ''),
]

OS_NAMES = {
    'macos': 'macosx',
    'visionos': 'xros',
    'uefi': 'windows',
    'solid_asp3': 'none',
    'horizon': 'none',
    'teeos': 'none',
    'nuttx': 'none',
    'espidf': 'none',
    'nto': 'unknown',
    'trusty': 'unknown',
}

# Environments LLVM doesn't distinguish
BLANK_ENVS = {'newlib', 'nto70', 'nto71', 'nto71_iosock', 'p1', 'p2', 'relibc', 'sgx', 'uclibc'}

ABI_NAMES = {
    'sim': 'simulator',
    'llvm': '',
    'softfloat': '',
    'uwp': '',
    'vec-extabi': '',
    'ilp32': '_ilp32',
    'abi64': '',
}

_ARCH_RULES = [(re.compile(pattern), vendor, arch) for pattern, vendor, arch in ARCH_RULES]


def llvm_arch(info: TargetInfo) -> str:
    for pattern, vendor, arch in _ARCH_RULES:
        if pattern.fullmatch(info.full_arch) and vendor in (None, info.vendor):
            return arch
    return info.full_arch


def llvm_vendor(info: TargetInfo) -> str:
    for vendor, os, arch, result in VENDOR_RULES:
        if vendor not in (None, info.vendor):
            continue
        if os not in (None, info.os):
            continue
        if arch not in (None, info.arch):
            continue
        return result
    return info.vendor


def llvm_target(info: TargetInfo, version: Optional[str] = None) -> str:
    """
    The LLVM/Clang target triple for `info`.

    Format: <arch>[-<vendor>]-<os><version>[-<env><abi>]

    `version` (e.g. a deployment target like '14.0') is appended directly to
    the OS component.
    """
    arch = llvm_arch(info)
    vendor = llvm_vendor(info)
    os = OS_NAMES.get(info.os, info.os) + (version or '')
    env = '' if info.env in BLANK_ENVS else info.env
    abi = ABI_NAMES.get(info.abi, info.abi)

    components = [arch]
    if vendor:
        components.append(vendor)
    components.append(os)
    if env or abi:
        components.append(env + abi)
    return '-'.join(components)
