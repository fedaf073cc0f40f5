import os

# ✅ 테스트는 MySQL 대신 메모리 SQLite로 실행 (프로젝트 모듈 import 전에 설정)
os.environ.setdefault("DB_DIALECT", "sqlite")
os.environ.setdefault("DB_NAME", ":memory:")

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base
from models.instructors import Instructor
from models.courses import Course
from models.students import Student
from models.students_courses import StudentCourse


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db):
    """
    강사 2명, 강좌 3개, 학생 4명 기본 데이터

    2024-01-01 ~ 2024-06-30 기준 이수 학점:
      A(Jane Doe)   = Algebra 6 + Physics 4 = 10  (History는 이수일 없음)
      B(Bob Brown)  = Physics 4                   (History는 기간 밖)
      C(Carl Cox)   = Algebra 6 + Physics 4 = 10  (양 끝 경계일)
      D(Dana White) = 0                           (이수 기록 없음)
    """
    db.add_all([
        Instructor(id=1, first_name="John", last_name="Smith"),
        Instructor(id=2, first_name="Ada", last_name="Lovelace"),
    ])
    db.add_all([
        Course(id=1, name="Algebra", total_time=10, credit=6, instructor_id=1),
        Course(id=2, name="Physics", total_time=20, credit=4, instructor_id=2),
        Course(id=3, name="History", total_time=5, credit=2, instructor_id=1),
    ])
    db.add_all([
        Student(pin="A", first_name="Jane", last_name="Doe"),
        Student(pin="B", first_name="Bob", last_name="Brown"),
        Student(pin="C", first_name="Carl", last_name="Cox"),
        Student(pin="D", first_name="Dana", last_name="White"),
    ])
    db.add_all([
        StudentCourse(student_pin="A", course_id=1, completion_date=datetime(2024, 1, 15, 10, 30)),
        StudentCourse(student_pin="A", course_id=2, completion_date=datetime(2024, 3, 1)),
        StudentCourse(student_pin="A", course_id=3, completion_date=None),
        StudentCourse(student_pin="B", course_id=2, completion_date=datetime(2024, 2, 10)),
        StudentCourse(student_pin="B", course_id=3, completion_date=datetime(2024, 12, 31)),
        StudentCourse(student_pin="C", course_id=1, completion_date=datetime(2024, 6, 30, 23, 59)),
        StudentCourse(student_pin="C", course_id=2, completion_date=datetime(2024, 1, 1, 0, 0)),
    ])
    db.commit()
    return db
