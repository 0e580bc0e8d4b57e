import asyncio
import uvicorn
from loguru import logger
from txt2img import config
from txt2img.app import make_app


async def main(settings: config.AppConfig) -> None:
    conf = config.load_config(settings)
    app = make_app(conf)

    if settings.mode == "dev":
        logger.info("develop mode")

    srv_conf = uvicorn.Config(app, host=settings.api_host, port=settings.api_port)
    srv = uvicorn.Server(srv_conf)
    await srv.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main(config.AppConfig()))
    except KeyboardInterrupt:
        pass
