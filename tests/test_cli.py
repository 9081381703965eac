import contextlib
import io
import unittest
from unittest.mock import patch

from kdbxbackup import cli
from kdbxbackup.errors import AuthError, EmptyFileError
from kdbxbackup.models import SyncResult


class TestCli(unittest.TestCase):
    def test_wrong_argument_count_exits_nonzero(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.parse_args(["only-one.kdbx"])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_parse_args(self) -> None:
        args = cli.parse_args(["db.kdbx", "secret.json", "--token-file", "t.json", "-v"])
        self.assertEqual(args.local_file, "db.kdbx")
        self.assertEqual(args.client_secrets_file, "secret.json")
        self.assertEqual(args.token_file, "t.json")
        self.assertTrue(args.verbose)

    @patch("kdbxbackup.cli.BackupManager")
    def test_success_returns_zero(self, manager_cls) -> None:
        manager_cls.return_value.sync.return_value = SyncResult(
            action="created", folder_id="D", file_id="F", local_md5="m"
        )

        with self.assertLogs("kdbxbackup", level="INFO") as logs:
            code = cli.main(["db.kdbx", "secret.json", "--token-file", "/tmp/t.json"])

        self.assertEqual(code, 0)
        manager_cls.return_value.sync.assert_called_once_with("db.kdbx")
        auth_info = manager_cls.call_args.args[0]
        self.assertEqual(auth_info.client_secrets_file, "secret.json")
        self.assertEqual(auth_info.token_file, "/tmp/t.json")
        self.assertIn("Beginning of syncing", logs.output[0])
        self.assertIn("End of syncing", logs.output[-1])

    @patch("kdbxbackup.cli.BackupManager")
    def test_sync_failure_is_logged_and_returns_one(self, manager_cls) -> None:
        manager_cls.return_value.sync.side_effect = EmptyFileError("File db.kdbx is empty")

        with self.assertLogs("kdbxbackup", level="ERROR") as logs:
            code = cli.main(["db.kdbx", "secret.json"])

        self.assertEqual(code, 1)
        self.assertIn("EmptyFileError: File db.kdbx is empty", logs.output[0])

    @patch("kdbxbackup.cli.BackupManager")
    def test_auth_failure_includes_cause(self, manager_cls) -> None:
        cause = RuntimeError("invalid_grant")
        manager_cls.side_effect = AuthError("Unable to retrieve token from web", cause=cause)

        with self.assertLogs("kdbxbackup", level="ERROR") as logs:
            code = cli.main(["db.kdbx", "secret.json"])

        self.assertEqual(code, 1)
        self.assertIn("invalid_grant", logs.output[0])

    def test_blank_argument_is_config_error(self) -> None:
        with self.assertLogs("kdbxbackup", level="ERROR") as logs:
            code = cli.main(["  ", "secret.json"])
        self.assertEqual(code, 1)
        self.assertIn("ConfigError", logs.output[0])

    def test_unresolvable_home_is_config_error(self) -> None:
        with patch("pathlib.Path.home", side_effect=RuntimeError("Could not determine home directory.")):
            with self.assertLogs("kdbxbackup", level="ERROR") as logs:
                code = cli.main(["db.kdbx", "secret.json"])
        self.assertEqual(code, 1)
        self.assertIn("ConfigError: Could not determine home directory.", logs.output[0])

if __name__ == "__main__":
    unittest.main()
