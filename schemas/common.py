"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorDetail, ErrorResponse (프로세스 경계에서 stderr로 출력)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: INVALID_DATE, IO_ERROR)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")

class ErrorResponse(BaseModel):
    """
    middlewares/error_handler.py에서 실패한 실행을 보고할 때 쓰는 표준 에러 포맷
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="실패 시점까지 걸린 시간(ms). 타이밍 측정과 연동"
    )

    model_config = ConfigDict(extra="ignore")
