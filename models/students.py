from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from database.db import Base

class Student(Base):
    __tablename__ = "Students"  # 학생 기본 정보 테이블

    pin = Column("Pin", String(50), primary_key=True)              # 학생 고유 식별번호 PIN (Primary Key)
    first_name = Column("first_name", String(100), nullable=False)  # 이름
    last_name = Column("last_name", String(100), nullable=False)    # 성

    # ✅ 이 학생의 수강/이수 기록들 (1:N 관계)
    students_courses = relationship("StudentCourse", back_populates="student")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
