import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from config.settings import settings
from database.db import SessionLocal, get_db
from middlewares.error_handler import run_with_error_handler
from middlewares.timing import Timer
from schemas.report import ReportRequest
from services.data_provider import DatabaseDataProvider, ReportInputError
from services.output_creators import CsvOutputCreator, HtmlOutputCreator, OutputCreator

logger = logging.getLogger(__name__)

OUTPUT_FORMAT_CSV = "csv"
OUTPUT_FORMAT_HTML = "html"


# ==========================================================
# [입력] 표준입력 6줄 → ReportRequest
# ==========================================================
def read_request(stream: TextIO) -> ReportRequest:
    """
    순서: PIN 목록, 최소 학점, 시작일, 종료일, 출력 형식, 출력 디렉터리
    - 줄이 모자라면 빈 문자열로 취급
    """
    lines = [stream.readline().rstrip("\r\n") for _ in range(6)]
    pins, minimum_credit, start_date, end_date, output_format, output_path = lines

    try:
        credit = int(minimum_credit)
    except ValueError:
        raise ReportInputError(
            f"최소 학점은 정수여야 합니다: {minimum_credit!r}", code="INVALID_MINIMUM_CREDIT"
        )

    return ReportRequest(
        pins=pins or None,
        minimum_credit=credit,
        start_date=start_date,
        end_date=end_date,
        output_format=output_format,
        output_path=output_path,
    )


# ==========================================================
# [출력 형식 분기] csv / html / 그 외(둘 다)
# ==========================================================
def select_output_creators(output_format: Optional[str]) -> List[OutputCreator]:
    fmt = (output_format or "").lower()
    if fmt == OUTPUT_FORMAT_CSV:
        return [CsvOutputCreator()]
    if fmt == OUTPUT_FORMAT_HTML:
        return [HtmlOutputCreator()]
    # 알 수 없는 형식(빈 값 포함)은 에러 대신 두 형식 모두 생성
    return [CsvOutputCreator(), HtmlOutputCreator()]


def generate_report(request: ReportRequest, session_factory=SessionLocal) -> List[Path]:
    """조회 1회 → 선택된 형식으로 파일 생성, 생성된 파일 경로 목록 반환"""
    with get_db(session_factory) as db:
        students = DatabaseDataProvider(db).get_students(
            request.pins, request.minimum_credit, request.start_date, request.end_date
        )

    return [
        creator.create_output(students, request.output_path)
        for creator in select_output_creators(request.output_format)
    ]


def main(stream: Optional[TextIO] = None, session_factory=SessionLocal) -> List[Path]:
    logging.basicConfig(level=settings.LOG_LEVEL)
    stream = stream if stream is not None else sys.stdin

    def _run() -> List[Path]:
        with Timer() as timer:
            request = read_request(stream)
            logger.info(
                f"리포트 요청: pins={request.pins!r}, minimum_credit={request.minimum_credit}, "
                f"기간={request.start_date} ~ {request.end_date}, format={request.output_format!r}"
            )
            written = generate_report(request, session_factory)
        logger.info(f"리포트 생성 완료: {len(written)}개 파일 ({timer.latency_ms}ms)")
        return written

    return run_with_error_handler(_run)


if __name__ == "__main__":
    main()
