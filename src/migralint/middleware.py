"""トークン認証ミドルウェア。"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

_BEARER_PREFIX = "Bearer "


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """リクエストのトークンを検証するミドルウェア。

    MIGRALINT_URL_TOKEN が設定されている場合、tokenクエリパラメータまたは
    Authorization: Bearer ヘッダーのどちらかが一致することを要求する。
    """

    def __init__(self, app: ASGIApp, url_token: str = "", skip_paths: frozenset[str] = frozenset({"/health"})) -> None:
        super().__init__(app)
        self.url_token = url_token
        self.skip_paths = skip_paths

    def _extract_token(self, request: Request) -> str:
        authorization = request.headers.get("authorization", "")
        if authorization.startswith(_BEARER_PREFIX):
            return authorization[len(_BEARER_PREFIX) :].strip()
        return request.query_params.get("token", "")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.url_token or request.url.path in self.skip_paths:
            return await call_next(request)

        if self._extract_token(request) != self.url_token:
            return JSONResponse(
                {"error": "Unauthorized", "message": "Invalid or missing token"},
                status_code=401,
            )

        return await call_next(request)
