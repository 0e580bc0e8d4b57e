from fastapi import APIRouter, Request
from loguru import logger
from pydantic import ValidationError
from .. import deps
from ..models.generation import GenerationRequest, GenerationResult
from .common import GenerationRoute, InvalidPromptError


router = APIRouter(route_class=GenerationRoute)


@router.post("/generate-image")
async def generate_image(
    req: Request,
    client: deps.ImageClient,
    conf: deps.Conf,
) -> GenerationResult:

    # Parse body by hand so bad input maps to 400 instead of 422.
    body = await req.body()
    try:
        gen = GenerationRequest.model_validate_json(body or b"{}")
    except ValidationError as exc:
        raise InvalidPromptError() from exc

    url = await client.generate(gen.prompt, conf.image.width, conf.image.height)
    if url is None:
        logger.debug("text to image service returned no image, use placeholder.")
        url = conf.image.placeholder_url

    return GenerationResult(message=url)
