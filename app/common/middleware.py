from __future__ import annotations

import logging
import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성/전파하고
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"
    max_length = 128

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.META.get(self.header_name)
        request_id = (
            str(incoming).strip()[: self.max_length] if incoming else str(uuid.uuid4())
        )

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        response = self.get_response(request)
        response[self.response_header] = request_id
        logger.info(
            "request_completed method=%s path=%s status=%s",
            request.method,
            request.path,
            response.status_code,
        )
        return response
