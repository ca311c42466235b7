# app/main.py

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import ListenError, StartupError
from app.api.api import setup
from app.db import session

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- CORS ----------
    # "*" with credentials: Starlette echoes the request Origin back
    # whenever credentials are involved.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ROUTES ----------
    setup(app)

    return app


def serve(application: FastAPI, host: str, port: int) -> None:
    """
    Bind host:port and serve until the process is killed.

    uvicorn exits the process itself when it cannot bind, that exit is
    turned into ListenError here.
    """
    config = uvicorn.Config(
        application,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except SystemExit as exc:
        if exc.code:
            raise ListenError(f"could not listen on {host}:{port}") from exc
        raise


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session.connect()
        application = create_application()
        serve(application, settings.host, settings.port)
    except StartupError as exc:
        logger.critical("Startup failed: %s", exc)
        sys.exit(1)


app = create_application()


if __name__ == "__main__":
    main()
