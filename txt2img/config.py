import tomllib
from dataclasses import dataclass, field, replace
from typing import Any, Literal
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


# Raised when the upstream credential or endpoint is not configured.
class ConfigurationError(Exception):

    def __str__(self) -> str:
        return "upstream api key or url is missing."


class AppConfig(BaseSettings):

    model_config = SettingsConfigDict(env_file=".env")

    mode: Literal["prod", "dev"] = "prod"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    config_file: str = "config.toml"

    # Overrides upstream.api_key from the config file when set.
    gpt_api_key: str = ""


@dataclass(frozen=True)
class UpstreamConfig:
    url: str = "https://chatgpt-42.p.rapidapi.com/texttoimage"
    host: str = "chatgpt-42.p.rapidapi.com"
    api_key: str = ""

    def is_complete(self) -> bool:
        return bool(self.api_key.strip()) and bool(self.url.strip())

    @staticmethod
    def load(toml: dict[str, Any]) -> "UpstreamConfig":
        return UpstreamConfig(
            url=toml["url"],
            host=toml["host"],
            api_key=toml.get("api_key", ""),
        )


@dataclass(frozen=True)
class ImageConfig:
    width: int = 512
    height: int = 512
    placeholder_url: str = "https://via.placeholder.com/600x400?text=Generated+Image"

    @staticmethod
    def load(toml: dict[str, Any]) -> "ImageConfig":
        return ImageConfig(
            width=int(toml["width"]),
            height=int(toml["height"]),
            placeholder_url=toml["placeholder_url"],
        )


@dataclass(frozen=True)
class Config:
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    image: ImageConfig = field(default_factory=ImageConfig)

    @staticmethod
    def load(toml: dict[str, Any]) -> "Config":
        return Config(
            upstream=UpstreamConfig.load(toml["upstream"]),
            image=ImageConfig.load(toml["image"]),
        )


def load_config(settings: AppConfig) -> Config:
    try:
        with open(settings.config_file, "rb") as fp:
            toml = tomllib.load(fp)
        conf = Config.load(toml)
    except FileNotFoundError:
        logger.warning(f"config file {settings.config_file} not found, use defaults.")
        conf = Config()

    if settings.gpt_api_key.strip():
        conf = replace(conf, upstream=replace(conf.upstream, api_key=settings.gpt_api_key))

    return conf
