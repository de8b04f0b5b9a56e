"""
This module provides CORS handling limited to part of the URL space.
"""

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathScopedCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware that only applies to paths under ``path_prefix``.

    Requests outside the prefix pass straight through without any CORS
    headers or preflight handling.
    """

    def __init__(self, app: ASGIApp, path_prefix: str = "/", **kwargs):
        super().__init__(app, **kwargs)
        self.path_prefix = path_prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and not scope["path"].startswith(self.path_prefix):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
