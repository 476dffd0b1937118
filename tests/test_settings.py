import pathlib
import shutil
import tempfile
import unittest
from unittest.mock import patch

from emorand.config.settings import (
    CACHE_FILENAME, DEFAULT_REQUEST_TIMEOUT, UNICODE_URL, Settings, load_settings
)
from emorand.utils.errors import CacheDirectoryError, ConfigError
from emorand.utils.paths import cache_dir_for, cache_path_for


class TestLoadSettings(unittest.TestCase):

    def test_defaults(self):
        settings = load_settings({})
        self.assertEqual(settings.source_url, UNICODE_URL)
        self.assertIsNone(settings.cache_dir)
        self.assertEqual(settings.request_timeout, DEFAULT_REQUEST_TIMEOUT)

    def test_overrides(self):
        settings = load_settings({
            "EMORAND_SOURCE_URL": "https://example.invalid/list.txt",
            "EMORAND_CACHE_DIR": "/tmp/emorand-test",
            "EMORAND_REQUEST_TIMEOUT": "2.5",
        })
        self.assertEqual(settings.source_url, "https://example.invalid/list.txt")
        self.assertEqual(settings.cache_dir, "/tmp/emorand-test")
        self.assertEqual(settings.request_timeout, 2.5)

    def test_blank_values_fall_back_to_defaults(self):
        settings = load_settings({"EMORAND_SOURCE_URL": "  ", "EMORAND_REQUEST_TIMEOUT": ""})
        self.assertEqual(settings.source_url, UNICODE_URL)
        self.assertEqual(settings.request_timeout, DEFAULT_REQUEST_TIMEOUT)

    def test_invalid_timeout(self):
        for raw in ("soon", "0", "-3"):
            with self.assertRaises(ConfigError):
                load_settings({"EMORAND_REQUEST_TIMEOUT": raw})


class TestPaths(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = pathlib.Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_override_directory_is_created(self):
        cache_dir = self.tmp_dir / "nested" / "emorand"
        path = cache_path_for(Settings(cache_dir=str(cache_dir)))

        self.assertEqual(path, cache_dir / CACHE_FILENAME)
        self.assertTrue(cache_dir.is_dir())
        self.assertFalse(path.exists())

    def test_platform_directory_is_used_without_override(self):
        with patch("emorand.utils.paths.sys.platform", "linux"), \
                patch("emorand.utils.paths.user_cache_dir", return_value=str(self.tmp_dir / "platform")) as mock_dir:
            self.assertEqual(cache_dir_for(Settings()), self.tmp_dir / "platform")
        mock_dir.assert_called_once_with("emorand", "jjpk")

    def test_macos_directory_uses_bundle_id(self):
        with patch("emorand.utils.paths.sys.platform", "darwin"), \
                patch("emorand.utils.paths.user_cache_dir", return_value=str(self.tmp_dir / "platform")) as mock_dir:
            cache_dir_for(Settings())
        mock_dir.assert_called_once_with("me.jjpk.emorand", "jjpk")

    def test_windows_directory_keeps_author_and_app_name(self):
        with patch("emorand.utils.paths.sys.platform", "win32"), \
                patch("emorand.utils.paths.user_cache_dir", return_value=str(self.tmp_dir / "platform")) as mock_dir:
            cache_dir_for(Settings())
        mock_dir.assert_called_once_with("emorand", "jjpk")

    def test_directory_resolution_failure(self):
        with patch("emorand.utils.paths.user_cache_dir", side_effect=KeyError("HOME")):
            with self.assertRaises(CacheDirectoryError):
                cache_dir_for(Settings())

    def test_directory_creation_failure(self):
        blocker = self.tmp_dir / "file"
        blocker.write_text("not a directory")

        with self.assertRaises(CacheDirectoryError) as ctx:
            cache_path_for(Settings(cache_dir=str(blocker / "sub")))
        self.assertIn(str(blocker / "sub"), str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
