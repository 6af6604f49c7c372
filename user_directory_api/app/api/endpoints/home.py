"""Greeting served at the site root."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hola mundo desde FastAPI"


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    return GREETING
