import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from jinja2 import Environment, FileSystemLoader

from schemas.report import StudentSummary

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# ✅ 출력 파일명은 고정 (repost.csv는 기존 사용처 호환을 위해 그대로 유지)
CSV_FILE_NAME = "repost.csv"
HTML_FILE_NAME = "report.html"

CSV_STUDENT_HEADER = "Student,TotalCredit"
CSV_COURSE_HEADER = "CourseName,Time,Credit,Instructor"


class OutputCreator(ABC):
    """학생 요약 목록을 받아 output_path 디렉터리에 리포트 파일을 쓴다"""

    file_name: str

    @abstractmethod
    def render(self, students: List[StudentSummary]) -> str: ...

    def create_output(self, students: List[StudentSummary], output_path: Union[str, Path]) -> Path:
        # 디렉터리가 없거나 쓰기 불가면 OSError 그대로 전파 (부분 파일 정리 없음)
        output_file = Path(output_path) / self.file_name
        with open(output_file, "w", encoding="utf-8", newline="") as f:
            f.write(self.render(students))
        logger.info(f"리포트 파일 생성 완료: {output_file}")
        return output_file


class CsvOutputCreator(OutputCreator):
    """
    CSV 리포트
    - 헤더 2줄(학생 / 강좌) 뒤에 학생 1줄 + 강좌 N줄 반복
    - 이름 안의 콤마는 이스케이프하지 않음
    """

    file_name = CSV_FILE_NAME

    def render(self, students: List[StudentSummary]) -> str:
        lines = [CSV_STUDENT_HEADER, CSV_COURSE_HEADER]
        for student in students:
            lines.append(f"{student.name},{student.total_credit}")
            for course in student.courses:
                lines.append(f"{course.name},{course.total_time},{course.credit},{course.instructor_name}")
        return "".join(f"{line}\n" for line in lines)


class HtmlOutputCreator(OutputCreator):
    """단일 <table> HTML 리포트 (templates/report.html, 이스케이프 없음)"""

    file_name = HTML_FILE_NAME

    def __init__(self, template_dir: Union[str, Path] = TEMPLATE_DIR):
        # 템플릿 환경 설정
        self.env = Environment(loader=FileSystemLoader(template_dir), autoescape=False)

    def render(self, students: List[StudentSummary]) -> str:
        """템플릿을 렌더링하여 HTML 생성"""
        template = self.env.get_template(HTML_FILE_NAME)
        return template.render(students=students)
