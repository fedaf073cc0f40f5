from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import relationship
from database.db import Base

# ✅ 외래키 관계 대상 모델 import
from models.instructors import Instructor as InstructorModel

class Course(Base):
    __tablename__ = "Courses"  # 강좌 정보 테이블

    id = Column("Id", Integer, primary_key=True, index=True)       # 강좌 고유 ID (Primary Key)
    name = Column("Name", String(200), nullable=False)              # 강좌 이름
    instructor_id = Column("instructor_id", Integer, ForeignKey("Instructors.Id"), nullable=False)  # 담당 강사 ID (FK)
    total_time = Column("total_time", SmallInteger, nullable=False, default=0)  # 총 수업 시간 (0~255)
    credit = Column("Credit", SmallInteger, nullable=False, default=0)          # 학점 (0~255)

    # ✅ 1바이트 범위 제약 (원본 스키마의 tinyint)
    __table_args__ = (
        CheckConstraint("total_time BETWEEN 0 AND 255", name="ck_courses_total_time_byte"),
        CheckConstraint("Credit BETWEEN 0 AND 255", name="ck_courses_credit_byte"),
    )

    # ✅ 관계 설정: 강사 객체와의 ORM 관계 (N:1)
    instructor = relationship(InstructorModel)

    # ✅ 이 강좌의 수강/이수 기록들 (1:N 관계)
    students_courses = relationship("StudentCourse", back_populates="course")
