import csv
import os
from typing import Optional

from sqlalchemy.orm import Session
from config.settings import settings
from database.db import SessionLocal
from models.students import Student as StudentModel  # ✅ 모델 import
import models.students_courses  # noqa: F401  관계 매핑(StudentCourse) 등록

CSV_PATH = os.path.join(settings.DATA_DIR, "students.csv")  # ✅ 파일 경로

def migrate_students(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    owns_session = db is None
    db = db or SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                student = StudentModel(
                    pin=row["pin"],                         # 학생 PIN
                    first_name=row["first_name"],           # 이름
                    last_name=row["last_name"]              # 성
                )
                db.add(student)
                count += 1

        db.commit()
    finally:
        if owns_session:
            db.close()
    print(f"✅ 학생 정보 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_students()
