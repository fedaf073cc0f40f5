from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

# ✅ 외래키 관계 대상 모델 import
from models.students import Student as StudentModel
from models.courses import Course as CourseModel

# ✅ 학생 ↔ 강좌 이수 기록 (연결 테이블)
class StudentCourse(Base):
    __tablename__ = "students_courses_xref"

    # (학생, 강좌) 복합 PK → 한 학생은 같은 강좌를 한 번만 이수
    student_pin = Column("student_pin", String(50), ForeignKey("Students.Pin"), primary_key=True)  # 학생 PIN (FK)
    course_id = Column("course_id", Integer, ForeignKey("Courses.Id"), primary_key=True)          # 강좌 ID (FK)
    completion_date = Column("completion_date", DateTime, nullable=True)  # 이수 일시 (NULL = 미이수)

    # ✅ 관계 설정: 학생/강좌 객체와의 ORM 관계 (N:1)
    student = relationship(StudentModel, back_populates="students_courses")
    course = relationship(CourseModel, back_populates="students_courses")
