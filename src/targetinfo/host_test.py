import unittest
from unittest.mock import patch

from targetinfo import host


class HostTests(unittest.TestCase):
    @patch("targetinfo.host.binding.get_process_triple", return_value="arm64-apple-darwin23.1.0")
    def test_host_triple_strips_os_version(self, _mock):
        self.assertEqual(host.host_triple(), "arm64-apple-darwin")

    @patch("targetinfo.host.binding.get_process_triple", return_value="x86_64-unknown-linux-gnu")
    def test_host_triple_linux(self, _mock):
        self.assertEqual(host.host_triple(), "x86_64-unknown-linux-gnu")

    @patch("targetinfo.host.binding.get_process_triple", return_value="x86_64-unknown-freebsd14.0")
    def test_host_triple_freebsd(self, _mock):
        self.assertEqual(host.host_triple(), "x86_64-unknown-freebsd")

    @patch("targetinfo.host.binding.initialize_all_targets")
    @patch("targetinfo.host.binding.Target.from_triple")
    def test_backend_supports(self, mock_from_triple, mock_init):
        self.assertTrue(host.backend_supports("x86_64-unknown-linux-gnu"))
        mock_init.assert_called_once_with()
        mock_from_triple.assert_called_once_with("x86_64-unknown-linux-gnu")

    @patch("targetinfo.host.binding.initialize_all_targets")
    @patch("targetinfo.host.binding.Target.from_triple", side_effect=RuntimeError("No available targets"))
    def test_backend_does_not_support(self, _mock_from_triple, _mock_init):
        self.assertFalse(host.backend_supports("clever-unknown-none"))


if __name__ == '__main__':
    unittest.main()
