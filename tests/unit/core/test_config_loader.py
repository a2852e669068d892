import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from core.config_loader import load_config, AppConfig, CacheConfig


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "cache": {"ttl_seconds": 120, "sweep_interval_seconds": 240},
            "extraction": {"keywords_file": "custom_keywords.yaml"},
            "web": {
                "port": 8081,
                "environment": "production",
                "rate_limit": {"limit": "10/minute"}
            }
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_from_yaml(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.cache.ttl_seconds, 120)
                self.assertEqual(config.cache.sweep_interval_seconds, 240)
                self.assertEqual(config.extraction.keywords_file, "custom_keywords.yaml")
                self.assertEqual(config.web.port, 8081)
                self.assertEqual(config.web.rate_limit.limit, "10/minute")

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config("missing.yaml")
                self.assertEqual(config.cache.ttl_seconds, 300)
                self.assertEqual(config.cache.sweep_interval_seconds, 600)
                self.assertTrue(config.cache.enabled)
                self.assertIsNone(config.extraction.keywords_file)
                self.assertEqual(config.validation.min_content_length, 10)
                self.assertEqual(config.validation.max_content_length, 50000)
                self.assertEqual(config.validation.max_upload_bytes, 5 * 1024 * 1024)
                self.assertEqual(config.web.cors_origins, ["http://localhost:3000"])
                self.assertEqual(config.web.rate_limit.limit, "100/15minutes")

    def test_empty_yaml_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.cache.ttl_seconds, 300)

    def test_env_var_override_cache(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {
                    "CACHE_TTL_SECONDS": "60",
                    "CACHE_SWEEP_INTERVAL_SECONDS": "90"
                }):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.cache.ttl_seconds, 60)
                    self.assertEqual(config.cache.sweep_interval_seconds, 90)

    def test_env_var_override_web(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {
                    "WEB_HOST": "127.0.0.1",
                    "WEB_PORT": "9000",
                    "APP_ENV": "staging",
                    "FRONTEND_URL": "https://resumes.example.com"
                }):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.web.host, "127.0.0.1")
                    self.assertEqual(config.web.port, 9000)
                    self.assertEqual(config.web.environment, "staging")
                    self.assertEqual(config.web.cors_origins, ["https://resumes.example.com"])

    def test_env_var_override_keywords_file(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {"RESUME_KEYWORDS_FILE": "/etc/resume/keywords.yaml"}):
                config = load_config("missing.yaml")
                self.assertEqual(config.extraction.keywords_file, "/etc/resume/keywords.yaml")

    def test_invalid_ttl_rejected(self):
        with self.assertRaises(ValueError):
            CacheConfig(ttl_seconds=0)


if __name__ == '__main__':
    unittest.main()
