import unittest
from pathlib import Path
from unittest.mock import patch

from kdbxbackup.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid(self) -> None:
        info = AuthInfo(
            client_secrets_file="/tmp/client_secrets.json",
            token_file="/tmp/token.json",
        )
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_blank_values(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="x", token_file="  ")
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="", token_file="t.json")

    def test_from_paths_defaults_to_home_token_cache(self) -> None:
        with patch("pathlib.Path.home", return_value=Path("/home/alice")):
            info = AuthInfo.from_paths("secret.json")
        self.assertEqual(
            info.token_file,
            "/home/alice/.credentials/keepassx_backup/drive-python-keepassx-backup.json",
        )

    def test_from_paths_keeps_explicit_token_file(self) -> None:
        info = AuthInfo.from_paths("secret.json", "/tmp/tok.json")
        self.assertEqual(info.token_file, "/tmp/tok.json")


if __name__ == "__main__":
    unittest.main()
