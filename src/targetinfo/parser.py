# targetinfo - compiler target triple decomposition
# Licensed under MIT

"""
parser.py - Decomposes target triples into `TargetInfo` records.

Every table below is evaluated top to bottom, first match wins. The order
matters wherever two rules overlap (e.g. 'mips64' must be tried before 'mips').
"""

import re
from typing import Optional

from .target import Arch, ErrorKind, TargetError, TargetInfo

# Some of these don't match an existing target of any compiler yet, they're
# accepted anyhow to stay forward compatible.
ARCH_RULES = [
    (r'mipsisa32r6.*', Arch.mips32r6),  # mipsisa32r6, mipsisa32r6el
    (r'mipsisa64r6.*', Arch.mips64r6),  # mipsisa64r6, mipsisa64r6el
    (r'mips64.*', Arch.mips64),  # mips64, mips64el
    (r'mips.*', Arch.mips),  # mips, mipsel
    (r'loongarch64.*', Arch.loongarch64),
    (r'loongarch32.*', Arch.loongarch32),
    (r'powerpc64.*', Arch.powerpc64),  # powerpc64, powerpc64le
    (r'powerpc.*', Arch.powerpc),
    (r'ppc64.*', Arch.powerpc64),
    (r'ppc.*', Arch.powerpc),
    (r'x86_64.*', Arch.x86_64),  # x86_64, x86_64h
    (r'i.*86', Arch.x86),  # i386, i586, i686
    (r'arm64ec', Arch.arm64ec),
    (r'aarch64.*', Arch.aarch64),  # aarch64, aarch64_be
    (r'arm64.*', Arch.aarch64),  # arm64, arm64e, arm64_32
    (r'arm.*', Arch.arm),  # arm, armv7s, armeb, ...
    (r'thumb.*', Arch.arm),  # thumbv4t, thumbv7a, thumbv8m, ...
    (r'riscv64.*', Arch.riscv64),
    (r'riscv32.*', Arch.riscv32),
    (r'wasm64.*', Arch.wasm64),
    (r'wasm32.*', Arch.wasm32),  # wasm32, wasm32v1
    (r'asmjs', Arch.wasm32),
    (r'nvptx64.*', Arch.nvptx64),
    (r'nvptx.*', Arch.nvptx),
    (r'bpf.*', Arch.bpf),  # bpfeb, bpfel
    (r'pulley64.*', Arch.pulley64),
    (r'pulley32.*', Arch.pulley32),
    (r'clever.*', Arch.clever),
    (r'sparc|sparcv7|sparcv8', Arch.sparc),
    (r'sparc64|sparcv9', Arch.sparc64),
    (r'amdgcn', Arch.amdgpu),
    (r'avr', Arch.avr),
    (r'csky', Arch.csky),
    (r'hexagon', Arch.hexagon),
    (r'm68k', Arch.m68k),
    (r'msp430', Arch.msp430),
    (r'r600', Arch.r600),
    (r's390x', Arch.s390x),
    (r'xtensa', Arch.xtensa),
]

# (pattern, env, abi); env and abi are match templates, so the combined
# families can move their suffix into the ABI.
ENVABI_RULES = [
    # gnu, gnullvm, gnueabi, gnueabihf, gnuabiv2, gnuabi64, gnuspe, gnux32, gnu_ilp32
    (r'gnu_?(.*)', 'gnu', r'\1'),
    # musl, musleabi, musleabihf, muslabi64, muslspe
    (r'musl(.*)', 'musl', r'\1'),
    # uclibc, uclibceabi, uclibceabihf
    (r'uclibc(.*)', 'uclibc', r'\1'),
    # newlib, newlibeabihf
    (r'newlib(.*)', 'newlib', r'\1'),

    # Environments
    (r'msvc', 'msvc', ''),
    (r'ohos', 'ohos', ''),
    (r'qnx700', 'nto70', ''),
    (r'qnx710_iosock', 'nto71_iosock', ''),
    (r'qnx710', 'nto71', ''),
    (r'qnx800', 'nto80', ''),
    (r'sgx', 'sgx', ''),
    (r'threads', 'threads', ''),

    # ABIs
    (r'abi64', '', 'abi64'),
    (r'abiv2', '', 'spe'),
    (r'eabi', '', 'eabi'),
    (r'eabihf', '', 'eabihf'),
    (r'macabi', '', 'macabi'),
    (r'sim', '', 'sim'),
    (r'softfloat', '', 'softfloat'),
    (r'spe', '', 'spe'),
    (r'x32', '', 'x32'),

    # Object format in the env position, already implied by the OS
    (r'elf', '', ''),
    (r'freestanding', '', ''),
]

# OS names that imply an environment or ABI the triple doesn't spell out.
# Only fills a field the triple left empty.
OS_IMPLIED = {
    '3ds': ('env', 'newlib'),
    'vxworks': ('env', 'gnu'),
    'rtems': ('env', 'newlib'),
    'espidf': ('env', 'newlib'),
    'redox': ('env', 'relibc'),
    'aix': ('abi', 'vec-extabi'),
}

# Historical triples whose names don't follow the general rules.
TRIPLE_OVERRIDES = {
    # Actually simulator targets
    'i386-apple-ios': {'abi': 'sim'},
    'i686-apple-ios': {'abi': 'sim'},
    'x86_64-apple-ios': {'abi': 'sim'},
    'x86_64-apple-tvos': {'abi': 'sim'},
    # Should have been named *-muslabi64
    'mips64-openwrt-linux-musl': {'abi': 'abi64'},
    # ABI is part of the target, not of the name
    'armv6-unknown-freebsd': {'abi': 'eabihf'},
    'armv6k-nintendo-3ds': {'abi': 'eabihf'},
    'armv7-unknown-freebsd': {'abi': 'eabihf'},
    'armv7-unknown-linux-ohos': {'abi': 'eabi'},
    'armv7-unknown-trusty': {'abi': 'eabi'},
    'riscv32e-unknown-none-elf': {'abi': 'ilp32e'},
    'riscv32em-unknown-none-elf': {'abi': 'ilp32e'},
    'riscv32emc-unknown-none-elf': {'abi': 'ilp32e'},
}

OS_ALIASES = {
    # Horizon is the internal OS name of both the 3DS and the Switch
    '3ds': 'horizon',
    'switch': 'horizon',
    'darwin': 'macos',
}

# Vendors that are also reported as the ABI.
ABI_VENDORS = {'uwp', 'fortanix'}

# `none` here would be read as an OS, not as "no environment".
IRREGULAR_TARGETS = {
    'x86_64-unknown-linux-none': TargetInfo(
        full_arch='x86_64',
        arch=Arch.x86_64,
        vendor='unknown',
        os='linux',
        env='',
        abi='',
    ),
}

MAX_COMPONENTS = 4

_ARCH_RULES = [(re.compile(pattern), arch) for pattern, arch in ARCH_RULES]
_ENVABI_RULES = [(re.compile(pattern), env, abi) for pattern, env, abi in ENVABI_RULES]


def parse_arch(full_arch: str) -> Optional[str]:
    """Reduce a full architecture name to its family, or None if unknown."""
    for pattern, arch in _ARCH_RULES:
        if pattern.fullmatch(full_arch):
            return arch
    return None


def parse_envabi(component: str) -> Optional[tuple[str, str]]:
    """Split the last triple component into (env, abi), or None if it isn't one."""
    for pattern, env, abi in _ENVABI_RULES:
        match = pattern.fullmatch(component)
        if match:
            return match.expand(env), match.expand(abi)
    return None


def parse_os(os: str, env: str, abi: str) -> tuple[str, str, str]:
    """Apply OS aliases. Returns the (os, env, abi) that result."""
    if os in OS_ALIASES:
        return OS_ALIASES[os], env, abi
    # WASI names carry the preview version, e.g. wasip1, wasip2
    if os.startswith('wasi'):
        return 'wasi', os[len('wasi'):], abi
    # *-linux-androideabi should have been *-android-eabi
    if os == 'androideabi':
        return 'android', env, 'eabi'
    return os, env, abi


def parse_vendor(vendor: str, os: str) -> str:
    if vendor.startswith('esp'):  # esp, esp32, esp32s2, ...
        return 'espressif'
    if vendor == 'openwrt':
        return 'unknown'
    # *-linux-android*, where 'linux' sits in the vendor position
    if vendor == 'linux' and os == 'android':
        return 'unknown'
    return vendor


def decompose(target: str) -> TargetInfo:
    """
    Parse a target triple into a `TargetInfo`.

    Accepted shapes:
    - '<arch>-<vendor>-<os>-<env/abi>'
    - '<arch>-<vendor>-<os>'
    - '<arch>-<os>-<env/abi>'
    - '<arch>-<os>'

    Raises TargetError with kind InvalidTarget for malformed triples and
    UnknownTarget for an unrecognized architecture or environment/ABI.
    """
    if target in IRREGULAR_TARGETS:
        return IRREGULAR_TARGETS[target]

    full_arch, *components = target.split('-')
    if not full_arch:
        raise TargetError(ErrorKind.InvalidTarget, f"target `{target}` was empty", target)
    if len(components) + 1 > MAX_COMPONENTS:
        raise TargetError(ErrorKind.InvalidTarget, f"too many components in target `{target}`", target)
    if '' in components:
        raise TargetError(ErrorKind.InvalidTarget, f"target `{target}` has an empty component", target)

    arch = parse_arch(full_arch)
    if arch is None:
        raise TargetError(ErrorKind.UnknownTarget, f"target `{target}` had an unknown architecture", target)

    # Newer triples omit the vendor, and some distributions put their own
    # name there, so the components are read from the back: env/abi (if
    # any), then the OS, then the vendor (if any).
    if not components:
        raise TargetError(ErrorKind.InvalidTarget, f"target `{target}` must have at least two components", target)
    envabi_or_os = components.pop()

    envabi = parse_envabi(envabi_or_os)
    if envabi is not None:
        if not components:
            raise TargetError(ErrorKind.InvalidTarget, f"target `{target}` must have an OS component", target)
        os = components.pop()
        env, abi = envabi
    else:
        os, env, abi = envabi_or_os, '', ''

    if os in OS_IMPLIED:
        field, value = OS_IMPLIED[os]
        if field == 'env' and not env:
            env = value
        elif field == 'abi' and not abi:
            abi = value

    overrides = TRIPLE_OVERRIDES.get(target, {})
    env = overrides.get('env', env)
    abi = overrides.get('abi', abi)

    os, env, abi = parse_os(os, env, abi)

    vendor = parse_vendor(components.pop() if components else 'unknown', os)
    if vendor in ABI_VENDORS:
        abi = vendor

    if components:
        if envabi is not None or len(components) > 1:
            raise TargetError(ErrorKind.InvalidTarget, f"too many components in target `{target}`", target)
        raise TargetError(
            ErrorKind.UnknownTarget,
            f"unknown environment/ABI `{envabi_or_os}` in target `{target}`",
            target,
        )

    return TargetInfo(
        full_arch=full_arch,
        arch=arch,
        vendor=vendor,
        os=os,
        env=env,
        abi=abi,
    )
