import io
import unittest
from unittest.mock import patch

from targetinfo import cli


class CliTests(unittest.TestCase):
    def run_cli(self, *argv):
        """Helper method returning (exit code, stdout)"""
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            code = cli.main(list(argv))
        return code, stdout.getvalue()

    def test_decompose_triple(self):
        code, output = self.run_cli("aarch64-apple-darwin")
        self.assertEqual(code, 0)
        self.assertIn("arch:      aarch64\n", output)
        self.assertIn("os:        macos\n", output)
        self.assertIn("llvm:      arm64-apple-macosx\n", output)

    def test_llvm_version(self):
        code, output = self.run_cli("aarch64-apple-ios-sim", "--llvm-version", "14.0")
        self.assertEqual(code, 0)
        self.assertIn("llvm:      arm64-apple-ios14.0-simulator\n", output)

    def test_invalid_triple(self):
        code, output = self.run_cli("bogusarch-unknown-linux-gnu")
        self.assertEqual(code, 1)
        self.assertIn("Error parsing target: target `bogusarch-unknown-linux-gnu` had an unknown architecture", output)

    @patch("targetinfo.cli.host_triple", return_value="x86_64-unknown-linux-gnu")
    def test_defaults_to_host(self, mock_host):
        code, output = self.run_cli()
        self.assertEqual(code, 0)
        mock_host.assert_called_once_with()
        self.assertIn("llvm:      x86_64-unknown-linux-gnu\n", output)

    def test_from_environment(self):
        with patch.dict("os.environ", {"TARGET": "riscv64gc-unknown-linux-gnu"}, clear=True):
            code, output = self.run_cli("--env")
        self.assertEqual(code, 0)
        self.assertIn("full_arch: riscv64gc\n", output)
        self.assertIn("llvm:      riscv64-unknown-linux-gnu\n", output)

    def test_from_environment_missing(self):
        with patch.dict("os.environ", {}, clear=True):
            code, output = self.run_cli("--env")
        self.assertEqual(code, 1)
        self.assertIn("Error parsing target: failed reading TARGET", output)

    @patch("targetinfo.cli.backend_supports", return_value=False)
    def test_check_llvm_unsupported(self, mock_supports):
        code, output = self.run_cli("x86_64-unknown-linux-gnu", "--check-llvm")
        self.assertEqual(code, 1)
        mock_supports.assert_called_once_with("x86_64-unknown-linux-gnu")
        self.assertIn("Error: LLVM does not support x86_64-unknown-linux-gnu", output)

    @patch("targetinfo.cli.backend_supports", return_value=True)
    def test_check_llvm_supported(self, _mock_supports):
        code, output = self.run_cli("x86_64-unknown-linux-gnu", "--check-llvm")
        self.assertEqual(code, 0)
        self.assertIn("LLVM supports x86_64-unknown-linux-gnu", output)

    def test_list_targets(self):
        code, output = self.run_cli("--list-targets")
        self.assertEqual(code, 0)
        self.assertIn("Available architectures:", output)
        self.assertIn("  riscv64\n", output)

    def test_list_known(self):
        code, output = self.run_cli("--list-known")
        self.assertEqual(code, 0)
        self.assertIn("x86_64-unknown-linux-gnu", output)
        self.assertIn("wasm32-wasip2", output)


if __name__ == '__main__':
    unittest.main()
