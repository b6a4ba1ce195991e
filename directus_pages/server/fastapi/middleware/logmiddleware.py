import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from directus_pages.observability.logger_adaptor import get_logger
from directus_pages.server.fastapi.utils import EXCLUDED_LOG_PATHS

logger = get_logger(__name__)


class LogMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in EXCLUDED_LOG_PATHS:
            return await call_next(request)

        request_id = str(uuid4())
        start_time = time.time()

        logger.info(
            f"Request started: {request.method} {request.url.path} "
            f"(request_id={request_id}, client_host={request.client.host if request.client else None})"
        )

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"status={response.status_code} duration_ms={round(duration * 1000, 2)} "
                f"(request_id={request_id})"
            )
            return response

        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} error={e} "
                f"duration_ms={round(duration * 1000, 2)} (request_id={request_id})"
            )
            raise
