# targetinfo - compiler target triple decomposition
# Licensed under MIT

import argparse
import sys

from . import catalog
from .host import backend_supports, host_triple
from .llvm import llvm_target
from .parser import decompose
from .resolver import TargetInfoParser
from .target import Arch, TargetError, TargetInfo


def list_targets():
    """
    Print all architecture families and a few example target strings.
    """
    print("Available architectures:")
    for arch in Arch.families():
        print(f"  {arch}")

    print("\nExample target strings:")
    print("  x86_64-unknown-linux-gnu       (x86-64 Linux, glibc)")
    print("  aarch64-apple-darwin           (ARM64 macOS)")
    print("  thumbv7em-none-eabihf          (Cortex-M4/M7 bare-metal)")
    print("  riscv64gc-unknown-none-elf     (RISC-V 64-bit bare-metal)")
    print("  wasm32-wasip1                  (WebAssembly, WASI preview 1)")


def list_known():
    """
    Print every catalogued target with its decomposed fields.
    """
    for triple in catalog.triples():
        info, _features = catalog.lookup(triple)
        print(f"{triple:<40} {info.arch:<12} {info.vendor:<10} {info.os:<12} {info.env:<12} {info.abi}")


def print_target(info: TargetInfo, llvm: str):
    for name, value in info.fields().items():
        print(f"{name + ':':<11}{value}")
    print(f"{'llvm:':<11}{llvm}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="targetinfo", description="Decompose compiler target triples")
    parser.add_argument("triple", nargs='?', help="Target triple, e.g. x86_64-unknown-linux-gnu. Default is the host.", default=None)
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debugging output")
    parser.add_argument("--env", action="store_true", help="Resolve the target from TARGET and CARGO_CFG_TARGET_* variables")
    parser.add_argument("--host", action="store_true", help="Use the host triple reported by LLVM")
    parser.add_argument("--llvm-version", help="Version appended to the OS of the LLVM triple, e.g. 14.0", default=None)
    parser.add_argument("--check-llvm", action="store_true", help="Check that the installed LLVM supports the LLVM triple")

    # List options
    parser.add_argument("--list-targets", action="store_true", help="List all architecture families")
    parser.add_argument("--list-known", action="store_true", help="List all catalogued target triples")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.list_targets:
        list_targets()
        return 0
    if args.list_known:
        list_known()
        return 0

    try:
        if args.env:
            info = TargetInfoParser(debug=args.debug).parse_from_environment()
        else:
            triple = args.triple
            if triple is None or args.host:
                triple = host_triple()
                if args.debug:
                    print(f"Host triple: {triple}")
            info = decompose(triple)
    except TargetError as e:
        print(f"Error parsing target: {e}")
        print("Use --list-targets to see available options")
        return 1

    llvm = llvm_target(info, args.llvm_version)
    print_target(info, llvm)

    if args.debug:
        entry = catalog.lookup(args.triple or "")
        if entry is not None and entry[0] != info:
            print(f"Warning: catalogued target differs: {entry[0]}")

    if args.check_llvm:
        if backend_supports(llvm):
            print(f"LLVM supports {llvm}")
        else:
            print(f"Error: LLVM does not support {llvm}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
