from fastapi import FastAPI
from . import api, config


def make_app(conf: config.Config) -> FastAPI:
    app = FastAPI()
    app.state.config = conf
    app.include_router(api.router)

    return app
