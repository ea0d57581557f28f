# targetinfo - compiler target triple decomposition
# Licensed under MIT

"""
host.py - Asks the LLVM linked into llvmlite about the host and its backends.
"""

import re

from llvmlite import binding

# darwin23.1.0 -> darwin, freebsd14.0 -> freebsd
_OS_VERSION = re.compile(r'[0-9.]+$')


def host_triple() -> str:
    """
    The triple of the running process, as LLVM reports it, with the OS
    version stripped so it can be decomposed.
    """
    components = binding.get_process_triple().split('-')
    if len(components) > 2:
        components[2] = _OS_VERSION.sub('', components[2]) or components[2]
    return '-'.join(components)


def backend_supports(llvm_triple: str) -> bool:
    """Whether the installed LLVM can generate code for `llvm_triple`."""
    binding.initialize_all_targets()
    try:
        binding.Target.from_triple(llvm_triple)
    except RuntimeError:
        return False
    return True
