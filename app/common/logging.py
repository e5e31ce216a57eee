from __future__ import annotations

import logging

from common.masking import mask_secrets
from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 안전하게 쓰도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True


class SecretMaskingFormatter(logging.Formatter):
    """
    콜백 URL/프로바이더 응답이 그대로 로그에 남는 경우를 대비해
    포맷된 메시지에 마스킹을 적용합니다.

    레코드의 msg/args 는 건드리지 않으므로 같은 레코드를 받는
    다른 핸들러의 출력에는 영향을 주지 않습니다.
    """

    def formatMessage(self, record: logging.LogRecord) -> str:
        return mask_secrets(super().formatMessage(record))
