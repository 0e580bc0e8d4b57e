from fastapi import APIRouter
from . import generate

router = APIRouter(prefix="/api")

router.include_router(generate.router)
