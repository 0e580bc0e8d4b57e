import os
import tempfile
from unittest import TestCase
from dataclasses import asdict
from typing import Any
from txt2img import config

fake_upstream_conf: dict[str, Any] = {
    "url": "https://example.com/texttoimage",
    "host": "example.com",
    "api_key": "fake api key",
}

fake_image_conf: dict[str, Any] = {
    "width": 640,
    "height": 480,
    "placeholder_url": "https://example.com/placeholder.png",
}

fake_config: dict[str, Any] = {
    "upstream": fake_upstream_conf,
    "image": fake_image_conf,
}

fake_toml = """
[upstream]
url = "https://example.com/texttoimage"
host = "example.com"
api_key = "file key"

[image]
width = 640
height = 480
placeholder_url = "https://example.com/placeholder.png"
"""


class TestConfig(TestCase):

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.toml")
        with open(self.path, "w") as fp:
            fp.write(fake_toml)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_load_upstream_config(self):
        conf = config.UpstreamConfig.load(fake_upstream_conf)
        self.assertEqual(asdict(conf), fake_upstream_conf)

    def test_load_upstream_config_without_key(self):
        toml = {"url": "https://example.com", "host": "example.com"}
        conf = config.UpstreamConfig.load(toml)
        self.assertEqual(conf.api_key, "")
        self.assertFalse(conf.is_complete())

    def test_load_image_config(self):
        conf = config.ImageConfig.load(fake_image_conf)
        self.assertEqual(asdict(conf), fake_image_conf)

    def test_load_config(self):
        conf = config.Config.load(fake_config)
        self.assertEqual(asdict(conf), fake_config)

    def test_upstream_config_complete(self):
        self.assertTrue(config.UpstreamConfig(api_key="key").is_complete())
        self.assertFalse(config.UpstreamConfig(api_key="   ").is_complete())
        self.assertFalse(config.UpstreamConfig(api_key="key", url="").is_complete())

    def test_load_config_from_file(self):
        settings = config.AppConfig(config_file=self.path, gpt_api_key="")
        conf = config.load_config(settings)

        self.assertEqual(conf.upstream.api_key, "file key")
        self.assertEqual(conf.image.width, 640)
        self.assertEqual(conf.image.height, 480)

    def test_env_key_override_file_key(self):
        settings = config.AppConfig(config_file=self.path, gpt_api_key="env key")
        conf = config.load_config(settings)

        self.assertEqual(conf.upstream.api_key, "env key")
        self.assertEqual(conf.upstream.url, fake_upstream_conf["url"])

    def test_missing_config_file_use_defaults(self):
        missing = os.path.join(self.tmpdir.name, "missing.toml")
        settings = config.AppConfig(config_file=missing, gpt_api_key="env key")
        conf = config.load_config(settings)

        self.assertEqual(conf.image, config.ImageConfig())
        self.assertEqual(conf.upstream.url, config.UpstreamConfig().url)
        self.assertEqual(conf.upstream.api_key, "env key")

    def test_blank_env_key_keep_file_key(self):
        settings = config.AppConfig(config_file=self.path, gpt_api_key="   ")
        conf = config.load_config(settings)

        self.assertEqual(conf.upstream.api_key, "file key")
        self.assertTrue(conf.upstream.is_complete())

    def test_load_config_missing_section(self):
        with self.assertRaises(KeyError):
            config.Config.load({"upstream": fake_upstream_conf})

        with self.assertRaises(KeyError):
            config.UpstreamConfig.load({"host": "example.com"})
