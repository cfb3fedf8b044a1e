from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


GREETING = "Hello world, this is Hono!!"


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return GREETING
