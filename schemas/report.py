from pydantic import BaseModel, Field
from typing import List, Optional

# ==========================================================
# [리포트 출력용 스키마] - DB에 저장되지 않고 실행 시마다 새로 생성
# ==========================================================
class CourseSummary(BaseModel):
    name: str                                   # 강좌 이름
    total_time: int = Field(..., ge=0, le=255)  # 총 수업 시간
    credit: int = Field(..., ge=0, le=255)      # 학점
    instructor_name: str                        # 강사 이름 ("이름 성")


class StudentSummary(BaseModel):
    name: str                                   # 학생 이름 ("이름 성")
    total_credit: int = Field(..., ge=0)        # 기간 내 이수 학점 합계
    courses: List[CourseSummary] = []           # 기간 내 이수 강좌 목록


# ==========================================================
# [입력용 스키마] - 표준입력 6줄에서 읽은 실행 파라미터
# ==========================================================
class ReportRequest(BaseModel):
    pins: Optional[str] = None                  # 콤마 구분 PIN 목록 (비어 있으면 전체)
    minimum_credit: int                         # 최소 이수 학점
    start_date: str                             # 기간 시작일
    end_date: str                               # 기간 종료일
    output_format: str = ""                     # "csv" | "html" | 그 외(둘 다)
    output_path: str                            # 출력 디렉터리
