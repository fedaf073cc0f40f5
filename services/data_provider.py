import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Iterable, List, Optional, Set

from sqlalchemy.orm import Session, selectinload

from models.students import Student as StudentModel
from models.courses import Course as CourseModel
from models.students_courses import StudentCourse as StudentCourseModel
from schemas.report import CourseSummary, StudentSummary

logger = logging.getLogger(__name__)

# ✅ 허용하는 날짜 입력 형식 (ISO 8601은 fromisoformat이 먼저 처리)
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%m-%d-%Y",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%d.%m.%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


class ReportInputError(ValueError):
    """리포트 입력값 검증 실패 (빈 결과와 구분되는 실패)"""

    def __init__(self, message: str, code: str = "INVALID_INPUT"):
        super().__init__(message)
        self.code = code


class InvalidDateError(ReportInputError):
    """시작/종료 날짜 문자열 파싱 실패"""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_DATE")


def parse_date(value: Optional[str], field: str = "date") -> date:
    """날짜 문자열 → date (시각 정보는 버림)"""
    text = (value or "").strip()
    if text:
        try:
            # 3.10의 fromisoformat은 "Z" 접미사를 받지 않음
            iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
            return datetime.fromisoformat(iso).date()
        except ValueError:
            pass
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    raise InvalidDateError(f"{field} 날짜 형식이 올바르지 않습니다: {value!r}")


def split_pins(pins: Optional[str]) -> Optional[Set[str]]:
    """
    콤마로 구분된 PIN 문자열 → PIN 집합
    - 비어 있거나 공백뿐이면 None (= 필터 없음)
    - 각 항목의 앞뒤 공백은 제거하지 않음 (호출 측에서 깨끗한 값을 넘겨야 함)
    """
    if pins is None or not pins.strip():
        return None
    return set(pins.split(","))


def qualifying_completions(
    students_courses: Iterable[StudentCourseModel], range_start: date, range_end: date
) -> List[StudentCourseModel]:
    """이수일이 있고, 날짜 기준으로 [range_start, range_end] 안에 드는 이수 기록만 (양 끝 포함)"""
    completions = [
        sc for sc in students_courses
        if sc.completion_date is not None
        and range_start <= sc.completion_date.date() <= range_end
    ]
    return sorted(completions, key=lambda sc: (sc.completion_date, sc.course_id))


def to_course_summary(student_course: StudentCourseModel) -> CourseSummary:
    course = student_course.course
    return CourseSummary(
        name=course.name,
        total_time=course.total_time,
        credit=course.credit,
        instructor_name=course.instructor.full_name,
    )


class DataProvider(ABC):
    @abstractmethod
    def get_students(
        self, pins: Optional[str], minimum_credit: int, start_date: str, end_date: str
    ) -> List[StudentSummary]: ...


class DatabaseDataProvider(DataProvider):
    """DB에서 기간 내 최소 학점 이상을 이수한 학생 요약 목록을 만든다"""

    def __init__(self, db: Session):
        self.db = db

    def get_students(
        self, pins: Optional[str], minimum_credit: int, start_date: str, end_date: str
    ) -> List[StudentSummary]:
        range_start = parse_date(start_date, "start_date")
        range_end = parse_date(end_date, "end_date")

        required_pins = split_pins(pins)

        # 학생 → 이수 기록 → 강좌 → 강사 순으로 한 번에 로딩
        query = (
            self.db.query(StudentModel)
            .options(
                selectinload(StudentModel.students_courses)
                .selectinload(StudentCourseModel.course)
                .selectinload(CourseModel.instructor)
            )
            .order_by(StudentModel.pin)
        )
        if required_pins is not None:
            query = query.filter(StudentModel.pin.in_(sorted(required_pins)))

        students = query.all()

        if required_pins is not None:
            unknown = required_pins - {s.pin for s in students}
            if unknown:
                logger.debug(f"존재하지 않는 PIN 무시: {sorted(unknown)}")

        qualified_students: List[StudentSummary] = []
        for student in students:
            # 필터용 합계와 출력용 합계는 같은 이수 목록에서 계산
            completions = qualifying_completions(student.students_courses, range_start, range_end)
            total_credit = sum(sc.course.credit for sc in completions)
            if total_credit < minimum_credit:
                continue

            qualified_students.append(
                StudentSummary(
                    name=student.full_name,
                    total_credit=total_credit,
                    courses=[to_course_summary(sc) for sc in completions],
                )
            )

        logger.info(
            f"대상 학생 조회 완료: {len(qualified_students)}명 "
            f"(기간 {range_start} ~ {range_end}, 최소 학점 {minimum_credit})"
        )
        return qualified_students
