# api/middleware.py
"""Request middleware: CORS and per-request timing logs"""

import logging
import time
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger("web_agent.http")


def setup_middleware(app: FastAPI, cors_origins: List[str]):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_timing(request: Request, call_next):
        start = time.time()
        resp = await call_next(request)
        # Streaming responses are timed to the first byte
        logger.info(
            "%s %s -> %s in %.1fms",
            request.method,
            request.url.path,
            resp.status_code,
            (time.time() - start) * 1000,
        )
        return resp
