import unittest

from targetinfo.parser import decompose, parse_arch, parse_envabi, parse_os, parse_vendor
from targetinfo.target import Arch, ErrorKind, TargetError, TargetInfo


class DecomposeTests(unittest.TestCase):
    def assert_target(self, triple, full_arch, arch, vendor, os, env, abi):
        """Helper method to compare every field of a decomposed triple"""
        expected = TargetInfo(full_arch=full_arch, arch=arch, vendor=vendor, os=os, env=env, abi=abi)
        self.assertEqual(decompose(triple), expected, f"mismatch for {triple}")

    def assert_error(self, triple, kind):
        with self.assertRaises(TargetError) as ctx:
            decompose(triple)
        self.assertEqual(ctx.exception.kind, kind, f"wrong error kind for {triple!r}: {ctx.exception}")
        self.assertEqual(ctx.exception.target, triple)

    def test_linux_gnu(self):
        self.assert_target("x86_64-unknown-linux-gnu", "x86_64", "x86_64", "unknown", "linux", "gnu", "")

    def test_tier1(self):
        """Test that every tier 1 target parses"""
        for triple in [
            "aarch64-unknown-linux-gnu",
            "aarch64-apple-darwin",
            "i686-pc-windows-gnu",
            "i686-pc-windows-msvc",
            "i686-unknown-linux-gnu",
            "x86_64-apple-darwin",
            "x86_64-pc-windows-gnu",
            "x86_64-pc-windows-msvc",
            "x86_64-unknown-linux-gnu",
        ]:
            decompose(triple)

    def test_darwin_is_macos(self):
        self.assert_target("aarch64-apple-darwin", "aarch64", "aarch64", "apple", "macos", "", "")

    def test_linux_none_is_special_cased(self):
        self.assert_target("x86_64-unknown-linux-none", "x86_64", "x86_64", "unknown", "linux", "", "")

    def test_vendor_omitted(self):
        self.assert_target("thumbv7em-none-eabihf", "thumbv7em", "arm", "unknown", "none", "", "eabihf")
        self.assert_target("wasm32-wasip1", "wasm32", "wasm32", "unknown", "wasi", "p1", "")

    def test_distribution_vendor(self):
        self.assert_target("x86_64-alpine-linux-musl", "x86_64", "x86_64", "alpine", "linux", "musl", "")
        self.assert_target("arm-poky-linux-gnueabi", "arm", "arm", "poky", "linux", "gnu", "eabi")

    def test_gnu_suffixes(self):
        self.assert_target("x86_64-unknown-linux-gnux32", "x86_64", "x86_64", "unknown", "linux", "gnu", "x32")
        self.assert_target("aarch64-unknown-linux-gnu_ilp32", "aarch64", "aarch64", "unknown", "linux", "gnu", "ilp32")
        self.assert_target("x86_64-pc-windows-gnullvm", "x86_64", "x86_64", "pc", "windows", "gnu", "llvm")

    def test_qnx_environments(self):
        self.assert_target("aarch64-unknown-nto-qnx710", "aarch64", "aarch64", "unknown", "nto", "nto71", "")
        self.assert_target("x86_64-pc-nto-qnx710_iosock", "x86_64", "x86_64", "pc", "nto", "nto71_iosock", "")

    def test_os_implied_environment(self):
        self.assert_target("riscv32imc-esp-espidf", "riscv32imc", "riscv32", "espressif", "espidf", "newlib", "")
        self.assert_target("x86_64-wrs-vxworks", "x86_64", "x86_64", "wrs", "vxworks", "gnu", "")
        self.assert_target("powerpc64-ibm-aix", "powerpc64", "powerpc64", "ibm", "aix", "", "vec-extabi")

    def test_os_implied_environment_keeps_explicit_value(self):
        self.assert_target("armv7-unknown-rtems-uclibceabihf", "armv7", "arm", "unknown", "rtems", "uclibc", "eabihf")

    def test_simulator_exceptions(self):
        for triple in ["i386-apple-ios", "i686-apple-ios", "x86_64-apple-ios", "x86_64-apple-tvos"]:
            self.assertEqual(decompose(triple).abi, "sim", triple)
        self.assertEqual(decompose("aarch64-apple-ios").abi, "")

    def test_positional_abi_exceptions(self):
        self.assert_target("mips64-openwrt-linux-musl", "mips64", "mips64", "unknown", "linux", "musl", "abi64")
        self.assert_target("armv6k-nintendo-3ds", "armv6k", "arm", "nintendo", "horizon", "newlib", "eabihf")
        self.assert_target("riscv32emc-unknown-none-elf", "riscv32emc", "riscv32", "unknown", "none", "", "ilp32e")

    def test_android(self):
        self.assert_target("aarch64-linux-android", "aarch64", "aarch64", "unknown", "android", "", "")
        self.assert_target("armv7-linux-androideabi", "armv7", "arm", "unknown", "android", "", "eabi")

    def test_horizon(self):
        self.assert_target("aarch64-nintendo-switch-freestanding", "aarch64", "aarch64", "nintendo", "horizon", "", "")

    def test_abi_vendors(self):
        self.assert_target("x86_64-fortanix-unknown-sgx", "x86_64", "x86_64", "fortanix", "unknown", "sgx", "fortanix")
        self.assert_target("aarch64-uwp-windows-gnu", "aarch64", "aarch64", "uwp", "windows", "gnu", "uwp")

    def test_extra_targets(self):
        """Custom triples not (or no longer) known by any reference compiler"""
        for triple in [
            "aarch64-unknown-none-gnu",
            "aarch64-uwp-windows-gnu",
            "arm-frc-linux-gnueabi",
            "arm-unknown-netbsd-eabi",
            "armv7neon-unknown-linux-gnueabihf",
            "armv7neon-unknown-linux-musleabihf",
            "thumbv7-unknown-linux-gnueabihf",
            "thumbv7-unknown-linux-musleabihf",
            "armv7-apple-ios",
            "wasm32-wasi",
            "x86_64-rumprun-netbsd",
            "x86_64-unknown-linux",
            "x86_64-alpine-linux-musl",
            "x86_64-chimera-linux-musl",
            "x86_64-foxkit-linux-musl",
            "arm-poky-linux-gnueabi",
            "x86_64-unknown-moturus",
        ]:
            decompose(triple)

    def test_subarchitecture_folding(self):
        """Test that every variant of a family folds to the same arch"""
        families = {
            Arch.x86_64: ["x86_64", "x86_64h"],
            Arch.x86: ["i386", "i586", "i686"],
            Arch.aarch64: ["aarch64", "aarch64_be", "arm64", "arm64e", "arm64_32"],
            Arch.arm: ["arm", "armeb", "armv5te", "armv7", "armv7s", "armv7neon", "thumbv6m", "thumbv7em", "thumbv8m.main"],
            Arch.mips: ["mips", "mipsel"],
            Arch.mips64: ["mips64", "mips64el"],
            Arch.mips32r6: ["mipsisa32r6", "mipsisa32r6el"],
            Arch.mips64r6: ["mipsisa64r6", "mipsisa64r6el"],
            Arch.powerpc: ["powerpc", "ppc"],
            Arch.powerpc64: ["powerpc64", "powerpc64le", "ppc64", "ppc64le"],
            Arch.riscv32: ["riscv32", "riscv32i", "riscv32imac", "riscv32e", "riscv32gc"],
            Arch.riscv64: ["riscv64", "riscv64gc", "riscv64imac"],
            Arch.wasm32: ["wasm32", "wasm32v1", "asmjs"],
            Arch.wasm64: ["wasm64"],
            Arch.nvptx64: ["nvptx64"],
            Arch.bpf: ["bpfeb", "bpfel"],
            Arch.loongarch64: ["loongarch64"],
            Arch.sparc: ["sparc", "sparcv7", "sparcv8"],
            Arch.sparc64: ["sparc64", "sparcv9"],
            Arch.amdgpu: ["amdgcn"],
            Arch.arm64ec: ["arm64ec"],
        }
        for family, variants in families.items():
            for variant in variants:
                info = decompose(f"{variant}-unknown-linux-gnu")
                self.assertEqual(info.arch, family, variant)
                self.assertEqual(info.full_arch, variant)

    def test_arch_is_always_a_family(self):
        for full_arch in ["x86_64", "i686", "armv7", "riscv64gc", "s390x", "xtensa", "pulley64", "clever"]:
            self.assertIn(parse_arch(full_arch), Arch.families())

    def test_deterministic(self):
        for triple in ["x86_64-unknown-linux-gnu", "armv7-linux-androideabi", "wasm32-wasip2"]:
            self.assertEqual(decompose(triple), decompose(triple))

    def test_malformed(self):
        """Test that malformed triples are rejected as invalid"""
        self.assert_error("", ErrorKind.InvalidTarget)
        self.assert_error("x86_64", ErrorKind.InvalidTarget)
        self.assert_error("a-b-c-d-e-f", ErrorKind.InvalidTarget)
        self.assert_error("x86_64-unknown--gnu", ErrorKind.InvalidTarget)
        self.assert_error("-unknown-linux-gnu", ErrorKind.InvalidTarget)

    def test_envabi_without_os(self):
        self.assert_error("x86_64-gnu", ErrorKind.InvalidTarget)

    def test_unknown_arch(self):
        self.assert_error("bogusarch-unknown-linux-gnu", ErrorKind.UnknownTarget)

    def test_unknown_envabi(self):
        self.assert_error("x86_64-unknown-linux-bogus", ErrorKind.UnknownTarget)
        self.assert_error("avr-unknown-gnu-atmega328", ErrorKind.UnknownTarget)


class TableTests(unittest.TestCase):
    def test_parse_arch(self):
        self.assertEqual(parse_arch("mipsisa64r6el"), Arch.mips64r6)
        self.assertEqual(parse_arch("mips64el"), Arch.mips64)
        self.assertEqual(parse_arch("arm64ec"), Arch.arm64ec)
        self.assertEqual(parse_arch("arm64e"), Arch.aarch64)
        self.assertIsNone(parse_arch("sparcv10"))
        self.assertIsNone(parse_arch("x86"))

    def test_parse_envabi(self):
        self.assertEqual(parse_envabi("gnueabihf"), ("gnu", "eabihf"))
        self.assertEqual(parse_envabi("musleabi"), ("musl", "eabi"))
        self.assertEqual(parse_envabi("uclibc"), ("uclibc", ""))
        self.assertEqual(parse_envabi("newlibeabihf"), ("newlib", "eabihf"))
        self.assertEqual(parse_envabi("abiv2"), ("", "spe"))
        self.assertEqual(parse_envabi("qnx800"), ("nto80", ""))
        self.assertEqual(parse_envabi("elf"), ("", ""))
        self.assertIsNone(parse_envabi("linux"))
        self.assertIsNone(parse_envabi("none"))

    def test_parse_os(self):
        self.assertEqual(parse_os("switch", "", ""), ("horizon", "", ""))
        self.assertEqual(parse_os("wasip2", "", ""), ("wasi", "p2", ""))
        self.assertEqual(parse_os("wasip1", "threads", ""), ("wasi", "p1", ""))
        self.assertEqual(parse_os("androideabi", "", ""), ("android", "", "eabi"))
        self.assertEqual(parse_os("linux", "gnu", ""), ("linux", "gnu", ""))

    def test_parse_vendor(self):
        self.assertEqual(parse_vendor("esp32s3", "espidf"), "espressif")
        self.assertEqual(parse_vendor("openwrt", "linux"), "unknown")
        self.assertEqual(parse_vendor("linux", "android"), "unknown")
        self.assertEqual(parse_vendor("linux", "linux"), "linux")


if __name__ == '__main__':
    unittest.main()
