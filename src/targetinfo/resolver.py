# targetinfo - compiler target triple decomposition
# Licensed under MIT

"""
resolver.py - Resolves the current target from the build environment.

The build orchestrator sets the selected triple in TARGET, and usually the
individual fields in CARGO_CFG_TARGET_*. Those fields are preferred since
they also describe custom targets we can't parse. When they're missing we
fall back to decomposing TARGET.
"""

import os
import threading
from typing import Mapping, Optional

from .parser import decompose
from .target import ErrorKind, TargetError, TargetInfo

TARGET_VAR = "TARGET"
FIELD_PREFIX = "CARGO_CFG_TARGET_"

_UNSET = object()


class TargetInfoParser:
    """
    Resolves the target once and caches the result, including failures.
    Safe to share between threads: the environment is read at most once.
    """
    def __init__(self, environ: Optional[Mapping[str, str]] = None, target_var: str = TARGET_VAR,
                 field_prefix: str = FIELD_PREFIX, debug: bool = False):
        self.environ = os.environ if environ is None else environ
        self.target_var = target_var
        self.field_prefix = field_prefix
        self.debug = debug
        self._lock = threading.Lock()
        self._result = _UNSET

    def parse_from_environment(self) -> TargetInfo:
        result = self._result
        if result is _UNSET:
            with self._lock:
                if self._result is _UNSET:
                    try:
                        self._result = self._from_environment()
                    except TargetError as e:
                        self._result = e
                result = self._result
        if isinstance(result, TargetError):
            raise result.clone()
        return result

    def _from_environment(self) -> TargetInfo:
        triple = self.environ.get(self.target_var)
        if triple is None:
            raise TargetError(
                ErrorKind.EnvVarNotFound,
                f"failed reading {self.target_var}: environment variable not found",
                self.target_var,
            )
        if self.debug:
            print(f"{self.target_var}={triple}")

        full_arch, sep, _rest = triple.partition('-')
        if not sep:
            raise TargetError(
                ErrorKind.InvalidTarget,
                f"target `{triple}` had an unknown architecture",
                triple,
            )

        # The override variables are normally all set, so failing to parse
        # TARGET is only fatal if one of them turns out to be missing.
        try:
            fallback = decompose(triple)
        except TargetError as e:
            if self.debug:
                print(f"No fallback information for `{triple}`: {e}")
            fallback = None

        def field(name: str, required: bool = True) -> str:
            var = self.field_prefix + name.upper()
            value = self.environ.get(var)
            if value is not None:
                if self.debug:
                    print(f"  {name}: {value!r} (from {var})")
                return value
            if fallback is not None:
                value = getattr(fallback, name)
                if self.debug:
                    print(f"  {name}: {value!r} (parsed from {self.target_var})")
                return value
            if not required:
                return ''
            raise TargetError(
                ErrorKind.EnvVarNotFound,
                f"did not find fallback information for target `{triple}`, and failed reading {var}",
                var,
            )

        return TargetInfo(
            full_arch=full_arch,
            arch=field('arch'),
            vendor=field('vendor'),
            os=field('os'),
            env=field('env'),
            # Older orchestrators don't report the ABI; '' is right for
            # most targets they'd build for.
            abi=field('abi', required=False),
        )
