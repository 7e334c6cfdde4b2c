"""FastAPI application serving a static build directory with SPA fallback."""

import argparse
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from spaserve.config import Settings, build_settings, settings
from spaserve.resolver import StaticResolver

logger = logging.getLogger(__name__)

SERVED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(config: Settings = settings) -> FastAPI:
    """Build an app whose every path resolves against ``config.ROOT_DIR``."""
    resolver = StaticResolver(config.root_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not resolver.root.is_dir():
            logger.warning(f"Root directory {resolver.root} is not a directory; requests will fall through to 404")
        logger.info(f"Serving {resolver.root} at http://localhost:{config.PORT}")
        yield

    # No docs routes: every path belongs to the asset tree
    app = FastAPI(
        title="spaserve",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.resolver = resolver

    @app.api_route("/{full_path:path}", methods=SERVED_METHODS, include_in_schema=False)
    async def serve(full_path: str):
        descriptor = await run_in_threadpool(resolver.resolve, "/" + full_path)
        # Explicit header so Starlette does not append a charset to mapped types
        return Response(
            content=descriptor.content,
            status_code=descriptor.status_code,
            headers={"Content-Type": descriptor.content_type},
        )

    return app


app = create_app()


def run(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve a static build directory with SPA fallback")
    parser.add_argument("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: PORT or 8000)")
    parser.add_argument("--root", default=None, help="Directory to serve (default: ROOT_DIR or ./dist)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or info)")
    args = parser.parse_args(argv)

    config = build_settings(
        HOST=args.host,
        PORT=args.port,
        ROOT_DIR=args.root,
        LOG_LEVEL=args.log_level,
    )
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
