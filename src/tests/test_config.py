"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

from flatwiki.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("articles")
            assert s.debug is False
            assert s.app_title == "FlatWiki"
            assert s.log_level == "INFO"
            assert s.port == 8080

    def test_from_env(self):
        env = {
            "FLATWIKI_DATA_DIR": "/tmp/wiki",
            "FLATWIKI_DEBUG": "true",
            "FLATWIKI_APP_TITLE": "MyWiki",
            "FLATWIKI_LOG_LEVEL": "DEBUG",
            "FLATWIKI_HOST": "0.0.0.0",
            "FLATWIKI_PORT": "9000",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("/tmp/wiki")
            assert s.debug is True
            assert s.app_title == "MyWiki"
            assert s.log_level == "DEBUG"
            assert s.host == "0.0.0.0"
            assert s.port == 9000

    def test_debug_false_values(self):
        with patch.dict("os.environ", {"FLATWIKI_DEBUG": "false"}, clear=True):
            s = Settings(_env_file=None)
            assert s.debug is False
