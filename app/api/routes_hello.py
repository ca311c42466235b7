# app/api/routes_hello.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["hello"])


@router.get("/", response_class=PlainTextResponse)
def hello():
    return "Hello World!"
