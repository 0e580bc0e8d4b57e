from typing import Any, Callable, Coroutine
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from loguru import logger
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from ..ai.text_to_image import UpstreamError
from ..config import ConfigurationError
from ..models.generation import ErrorResponse


# Raised when request body has no usable prompt.
class InvalidPromptError(Exception):

    def __str__(self) -> str:
        return "missing or invalid prompt."


def error_response(status_code: int, err: ErrorResponse, with_details: bool = True) -> JSONResponse:
    content = err.model_dump() if with_details else err.model_dump(exclude={"details"})
    return JSONResponse(status_code=status_code, content=content)


def describe(exc: Exception) -> str:
    return str(exc) or repr(exc)


# Custom route class turn every failure of generate api into one json response.
class GenerationRoute(APIRoute):

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def route_handler(req: Request) -> Response:
            try:
                return await original_route_handler(req)

            # Api key or url not configured, nothing sent to upstream.
            except ConfigurationError as exc:
                logger.error(f"server configuration incomplete, {exc}")
                err = ErrorResponse(error="API key or URL is missing in environment variables")
                return error_response(500, err, with_details=False)

            except InvalidPromptError as exc:
                logger.debug(f"reject request, {exc}")
                err = ErrorResponse(error="Missing or invalid 'prompt' in request body")
                return error_response(400, err, with_details=False)

            # Upstream reachable but answer with a failure status.
            except UpstreamError as exc:
                err = ErrorResponse(error="Downstream API error", details=exc.body)
                return error_response(502, err)

            except (HTTPException, RequestValidationError):
                raise

            # Transport failures and anything else unexpected.
            except Exception as exc:
                logger.error(f"error in generate image api, {repr(exc)}")
                err = ErrorResponse(error="Internal server error", details=describe(exc))
                return error_response(500, err)

        return route_handler
