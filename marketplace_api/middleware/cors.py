"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse, Response
from marketplace_api.config import get_settings

settings = get_settings()


class PreflightCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware whose preflights always succeed.

    A rejected preflight gets a 200 without Access-Control-Allow-Origin,
    so the browser blocks the cross-origin call itself.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code == 200:
            return response

        headers = {
            key: value for key, value in self.preflight_headers.items()
            if key.lower() != "access-control-allow-origin"
        }
        return PlainTextResponse("OK", status_code=200, headers=headers)


def setup_cors(app):
    """
    Configure CORS middleware for the application

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
