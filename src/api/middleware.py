"""HTTP middleware wiring: CORS, HSTS, HTTPS redirection and forwarded headers."""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from application.settings import Settings

log = logging.getLogger(__name__)


def hsts_header_value(settings: Settings) -> str:
    value = f"max-age={settings.hsts_max_age}"
    if settings.hsts_include_subdomains:
        value += "; includeSubDomains"
    return value


def configure_middleware(app: FastAPI, settings: Settings) -> None:
    """Add the cross-cutting middleware.

    Starlette runs the last added middleware first, so they are added from the
    innermost (CORS) to the outermost (forwarded headers). Forwarded headers
    must be applied before the HTTPS redirection inspects the scheme.
    """
    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=settings.cors_exposed_headers,
        )

    if not settings.is_development:
        header_value = hsts_header_value(settings)

        @app.middleware("http")
        async def add_hsts_header(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
            """Send Strict-Transport-Security on HTTPS responses."""
            response = await call_next(request)
            if request.url.scheme == "https":
                response.headers["Strict-Transport-Security"] = header_value
            return response

    if settings.enable_https_redirection:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=settings.forwarded_allow_ips)
    log.debug(f"Middleware configured (environment={settings.environment}, https_redirection={settings.enable_https_redirection})")
