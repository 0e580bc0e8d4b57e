from typing import Annotated
from fastapi import Depends, FastAPI, Request
from . import config
from .ai import text_to_image


def get_app(req: Request) -> FastAPI:
    return req.app


def get_config(app: FastAPI = Depends(get_app)) -> config.Config:
    return app.state.config


def get_upstream_config(conf: config.Config = Depends(get_config)) -> config.UpstreamConfig:
    if not conf.upstream.is_complete():
        raise config.ConfigurationError()
    return conf.upstream


def get_image_client(
    upstream: config.UpstreamConfig = Depends(get_upstream_config),
) -> text_to_image.TextToImageClient:
    return text_to_image.TextToImageClient(upstream)


Conf = Annotated[config.Config, Depends(get_config)]

ImageClient = Annotated[text_to_image.TextToImageClient, Depends(get_image_client)]
