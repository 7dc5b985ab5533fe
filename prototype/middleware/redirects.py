"""Redirect rewriting middleware — keeps handler redirects inside their version mount.

Handlers are shared by every version app and only ever redirect to
path-absolute targets such as ``/question-2``. The middleware attaches a
:class:`Redirector` bound to the current mount prefix to ``request.state``;
handlers receive it through :func:`get_redirector` and never see the prefix.
"""


import logging
from collections.abc import Callable
from typing import Optional

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from prototype.core.config import settings
from prototype.core.exceptions import InvalidRedirectTarget
from prototype.services.redirect import rewrite_target

logger = logging.getLogger(__name__)


def mount_prefix(request: Request) -> str:
    """Path the current (sub-)application is mounted under, e.g. ``/v1``."""
    return request.scope.get("root_path", "")


class Redirector:
    """Request-scoped redirect primitive bound to one mount prefix."""

    def __init__(self, mount_prefix: str = "", status_code: Optional[int] = None):
        self.mount_prefix = mount_prefix
        self.status_code = status_code

    def __call__(self, url: str, status_code: Optional[int] = None) -> RedirectResponse:
        if not isinstance(url, str):
            raise InvalidRedirectTarget(url)

        target = rewrite_target(url, self.mount_prefix)
        if target != url:
            logger.debug("Redirect %s rewritten to %s", url, target)

        return RedirectResponse(
            target,
            status_code=status_code or self.status_code or settings.redirect_status_code,
        )

    def __repr__(self) -> str:
        return f"Redirector(mount_prefix={self.mount_prefix!r})"


class RedirectRewriterMiddleware(BaseHTTPMiddleware):
    """Installs a prefixed :class:`Redirector` on every request.

    Must be added to the mounted version app, not the root app, so that the
    scope's ``root_path`` already carries the mount prefix. Installing it
    twice is harmless: a redirector already bound to the same prefix is kept,
    and a nested mount (longer prefix) replaces it rather than wrapping it.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        prefix = mount_prefix(request)
        installed = getattr(request.state, "redirect", None)

        if installed is None or installed.mount_prefix != prefix:
            request.state.redirect = Redirector(prefix)
            logger.debug("Redirect rewriter installed for %r", prefix or "/")

        return await call_next(request)


def get_redirector(request: Request) -> Redirector:
    """FastAPI dependency: the request's redirector, un-prefixed if none is installed."""
    return getattr(request.state, "redirect", None) or Redirector()
