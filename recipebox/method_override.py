from starlette.datastructures import QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

ALLOWED_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


class MethodOverrideMiddleware:
    """Let HTML forms issue PUT/PATCH/DELETE.

    A ``POST /recipes/<id>?_method=DELETE`` is routed as ``DELETE /recipes/<id>``.
    Only POST requests are rewritten.
    """

    def __init__(self, app: ASGIApp, param: str = "_method") -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            params = QueryParams(scope.get("query_string", b""))
            method = params.get(self.param, "").upper()
            if method in ALLOWED_METHODS:
                scope = dict(scope)
                scope["method"] = method
        await self.app(scope, receive, send)
