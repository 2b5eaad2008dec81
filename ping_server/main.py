import logging

import uvicorn
from fastapi import FastAPI

from ping_server.config import HOST, PORT, LOG_LEVEL, LOG_FORMAT
from ping_server.routes import ping


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ping Server",
        description="Answers GET /ping with a static pong.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.include_router(ping.router)
    return app


app = create_app()


def run(host: str = HOST, port: int = PORT):
    """
    Serves the app until the process is stopped.
    uvicorn exits non-zero when the port cannot be bound.
    """
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    # uvicorn's loggers propagate to the root logger configured above.
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
