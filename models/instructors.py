from sqlalchemy import Column, Integer, String
from database.db import Base

class Instructor(Base):
    __tablename__ = "Instructors"  # 강사 정보 테이블

    id = Column("Id", Integer, primary_key=True, index=True)       # 강사 고유 ID (Primary Key)
    first_name = Column("first_name", String(100), nullable=False)  # 이름
    last_name = Column("last_name", String(100), nullable=False)    # 성

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
