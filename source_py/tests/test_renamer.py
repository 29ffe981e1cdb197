import errno
import os
import tempfile
import unittest
from unittest.mock import patch

from folder_renamer.renamer import FolderRenamer
from folder_renamer.types import FolderMatch, TargetExistsError


class TestFolderRenamer(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.root_path = self.test_dir.name
        self.renamer = FolderRenamer(self.root_path)

    def tearDown(self):
        self.test_dir.cleanup()

    def create_dir(self, name):
        path = os.path.join(self.root_path, name)
        os.mkdir(path)
        return FolderMatch(path=path, name=name)

    def test_rename_moves_folder(self):
        match = self.create_dir("old_temp")
        with open(os.path.join(match.path, "keep.txt"), "w") as f:
            f.write("data")

        result = self.renamer.rename(match, "final")

        self.assertFalse(result.dry_run)
        self.assertFalse(os.path.exists(match.path))
        self.assertTrue(os.path.isfile(os.path.join(self.root_path, "final", "keep.txt")))
        self.assertEqual(result.new_path, os.path.join(self.root_path, "final"))

    def test_existing_directory_blocks_rename(self):
        match = self.create_dir("old")
        self.create_dir("new")

        with self.assertRaises(TargetExistsError) as ctx:
            self.renamer.rename(match, "new")

        self.assertEqual(ctx.exception.target, "new")
        self.assertTrue(os.path.isdir(match.path))
        self.assertTrue(os.path.isdir(os.path.join(self.root_path, "new")))

    def test_existing_file_blocks_rename(self):
        match = self.create_dir("old")
        with open(os.path.join(self.root_path, "new"), "w") as f:
            f.write("")

        with self.assertRaises(TargetExistsError):
            self.renamer.rename(match, "new")

        self.assertTrue(os.path.isdir(match.path))

    @unittest.skipIf(os.name == "nt", "symlinks need extra privileges on Windows")
    def test_dangling_symlink_blocks_rename(self):
        match = self.create_dir("old")
        os.symlink(os.path.join(self.root_path, "missing"), os.path.join(self.root_path, "new"))

        with self.assertRaises(TargetExistsError):
            self.renamer.rename(match, "new")

    @patch('os.rename')
    def test_dry_run_does_not_rename(self, mock_rename):
        match = self.create_dir("old")

        result = self.renamer.rename(match, "new", dry_run=True)

        self.assertTrue(result.dry_run)
        mock_rename.assert_not_called()

    @patch('os.rename')
    def test_os_error_propagates(self, mock_rename):
        match = self.create_dir("old")
        mock_rename.side_effect = PermissionError(errno.EACCES, "Permission denied", match.path)

        with self.assertRaises(PermissionError):
            self.renamer.rename(match, "new")


if __name__ == '__main__':
    unittest.main()
