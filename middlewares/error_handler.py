import logging
import sys
from typing import Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from middlewares.timing import Timer
from schemas.common import ErrorDetail, ErrorResponse
from services.data_provider import ReportInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def error_code_for(exc: Exception) -> str:
    if isinstance(exc, ReportInputError):
        return exc.code
    if isinstance(exc, OSError):
        return "IO_ERROR"
    if isinstance(exc, SQLAlchemyError):
        return "DATABASE_ERROR"
    return "INTERNAL_ERROR"


def run_with_error_handler(func: Callable[[], T]) -> T:
    """
    프로세스 경계 에러 핸들러
    - 실패하면 로그를 남기고 ErrorResponse(JSON)를 stderr에 쓴 뒤 종료 코드 1로 끝낸다
    - 재시도 없음
    """
    with Timer() as timer:
        try:
            return func()
        except Exception as exc:
            logger.exception("리포트 생성 실패")
            response = ErrorResponse(
                error=ErrorDetail(code=error_code_for(exc), message=str(exc)),
                latency_ms=timer.latency_ms,
            )
            print(response.model_dump_json(), file=sys.stderr)
            raise SystemExit(1) from exc
