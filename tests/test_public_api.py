import unittest

import kdbxbackup


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(kdbxbackup, "BackupManager"))
        self.assertTrue(hasattr(kdbxbackup, "authenticate"))
        self.assertTrue(hasattr(kdbxbackup, "sync"))
        self.assertTrue(hasattr(kdbxbackup, "AuthInfo"))
        self.assertTrue(hasattr(kdbxbackup, "OAuthClient"))

        self.assertTrue(hasattr(kdbxbackup, "RemoteFile"))
        self.assertTrue(hasattr(kdbxbackup, "SyncResult"))

        self.assertTrue(hasattr(kdbxbackup, "KdbxBackupError"))
        self.assertTrue(hasattr(kdbxbackup, "EmptyFileError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(kdbxbackup, "__all__"))
        self.assertIn("BackupManager", kdbxbackup.__all__)
        self.assertIn("KdbxBackupError", kdbxbackup.__all__)


if __name__ == "__main__":
    unittest.main()
