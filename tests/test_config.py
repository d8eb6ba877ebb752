import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from semver_isvalid.core import config as config_module
from semver_isvalid.core.config import Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        # Keep the user's real config and environment out of the tests.
        user_patch = patch.object(config_module, "USER_CONFIG_PATH", Path(self.tmp_dir.name) / "missing.toml")
        user_patch.start()
        self.addCleanup(user_patch.stop)
        env = {k: v for k, v in os.environ.items() if not k.startswith("SEMVER_ISVALID_")}
        env_patch = patch.dict(os.environ, env, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)

    def _write(self, name, content):
        path = Path(self.tmp_dir.name) / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_defaults(self):
        config = Config(config_path=None)
        self.assertFalse(config.get("with_v"))
        self.assertTrue(config.get("colors"))
        self.assertEqual(config.get("spec_url"), "https://semver.org")
        self.assertIsNone(config.get("does.not.exist"))
        self.assertEqual(config.get("does.not.exist", 5), 5)

    def test_file_overrides_defaults(self):
        path = self._write("custom.toml", 'with_v = true\nspec_url = "https://example.com/semver"\n')

        config = Config(config_path=path)

        self.assertTrue(config.get("with_v"))
        self.assertEqual(config.get("spec_url"), "https://example.com/semver")
        self.assertTrue(config.get("colors"))

    def test_invalid_file_is_ignored(self):
        path = self._write("broken.toml", "with_v = = true\n")

        with self.assertLogs("semver_isvalid.core.config", level="WARNING"):
            config = Config(config_path=path)

        self.assertFalse(config.get("with_v"))

    def test_env_overrides_file(self):
        path = self._write("custom.toml", "with_v = true\ncolors = true\n")

        with patch.dict(os.environ, {"SEMVER_ISVALID_WITH_V": "no", "SEMVER_ISVALID_COLORS": "0"}):
            config = Config(config_path=path)

        self.assertFalse(config.get("with_v"))
        self.assertFalse(config.get("colors"))

    def test_env_boolean_values(self):
        for value in ["true", "1", "yes", "ON"]:
            with self.subTest(value), patch.dict(os.environ, {"SEMVER_ISVALID_WITH_V": value}):
                self.assertTrue(Config().get("with_v"))

    def test_project_file_in_cwd(self):
        self._write("semver-isvalid.toml", "verbose = true\n")

        with patch.object(Path, "cwd", return_value=Path(self.tmp_dir.name)):
            config = Config()

        self.assertTrue(config.get("verbose"))

    def test_set_nested_key(self):
        config = Config()
        config.set("output.style", "plain")
        self.assertEqual(config.get("output.style"), "plain")

if __name__ == '__main__':
    unittest.main()
