from __future__ import annotations

import pytest

from schemas.report import CourseSummary, StudentSummary
from services.output_creators import CsvOutputCreator, HtmlOutputCreator

HTML_HEADER = (
    "<table><thead><tr><th>Student</th><th>Total Credit</th><th></th><th></th><th></th></tr>"
    "<tr><th></th><th>Course Name</th><th>Time</th><th>Credit</th><th>Instructor</th></tr></thead>"
)


@pytest.fixture
def jane() -> StudentSummary:
    return StudentSummary(
        name="Jane Doe",
        total_credit=6,
        courses=[CourseSummary(name="Algebra", total_time=10, credit=6, instructor_name="John Smith")],
    )


def test_csv_output_exact(tmp_path, jane):
    path = CsvOutputCreator().create_output([jane], tmp_path)
    assert path == tmp_path / "repost.csv"
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Student,TotalCredit",
        "CourseName,Time,Credit,Instructor",
        "Jane Doe,6",
        "Algebra,10,6,John Smith",
    ]


def test_csv_output_empty_list_has_headers_only(tmp_path):
    path = CsvOutputCreator().create_output([], str(tmp_path))
    assert path.read_text(encoding="utf-8") == "Student,TotalCredit\nCourseName,Time,Credit,Instructor\n"


def test_csv_does_not_escape_delimiters(tmp_path):
    student = StudentSummary(name="Doe, Jane", total_credit=0, courses=[])
    path = CsvOutputCreator().create_output([student], tmp_path)
    assert "Doe, Jane,0" in path.read_text(encoding="utf-8").splitlines()


def test_html_output_exact(tmp_path, jane):
    path = HtmlOutputCreator().create_output([jane], tmp_path)
    assert path == tmp_path / "report.html"
    assert path.read_text(encoding="utf-8") == (
        HTML_HEADER
        + "<tbody>"
        + "<tr><td>Jane Doe</td><td>6</td><td></td><td></td><td></td></tr>"
        + "<tr><td></td><td>Algebra</td><td>10</td><td>6</td><td>John Smith</td></tr>"
        + "</tbody></table>"
    )


def test_html_groups_courses_under_each_student(tmp_path, jane):
    bob = StudentSummary(
        name="Bob Brown",
        total_credit=7,
        courses=[
            CourseSummary(name="Physics", total_time=20, credit=4, instructor_name="Ada Lovelace"),
            CourseSummary(name="Chemistry", total_time=12, credit=3, instructor_name="Marie Curie"),
        ],
    )
    body = HtmlOutputCreator().render([jane, bob])
    assert body.index("Jane Doe") < body.index("Algebra") < body.index("Bob Brown") < body.index("Physics")
    assert body.count("<tr>") == 2 + 2 + 3
    assert "\n" not in body


def test_html_does_not_escape_markup(jane):
    jane.name = "<b>Jane</b>"
    assert "<td><b>Jane</b></td>" in HtmlOutputCreator().render([jane])


def test_html_empty_list(tmp_path):
    assert HtmlOutputCreator().render([]) == HTML_HEADER + "<tbody></tbody></table>"


@pytest.mark.parametrize("creator_cls", [CsvOutputCreator, HtmlOutputCreator])
def test_missing_output_directory_raises(tmp_path, jane, creator_cls):
    with pytest.raises(OSError):
        creator_cls().create_output([jane], tmp_path / "missing")


def test_existing_file_is_overwritten(tmp_path, jane):
    (tmp_path / "repost.csv").write_text("stale\n" * 10, encoding="utf-8")
    path = CsvOutputCreator().create_output([jane], tmp_path)
    assert "stale" not in path.read_text(encoding="utf-8")
