from fastapi import APIRouter, FastAPI

from app.api.routes_hello import router as hello_router


api_router = APIRouter()

api_router.include_router(hello_router)


def setup(app: FastAPI) -> None:
    """Install the route table on the application."""
    app.include_router(api_router)
