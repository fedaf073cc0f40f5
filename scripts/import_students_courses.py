import csv
import os
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session
from config.settings import settings
from database.db import SessionLocal
from models.students_courses import StudentCourse as StudentCourseModel  # ✅ 모델 import

CSV_PATH = os.path.join(settings.DATA_DIR, "students_courses.csv")  # ✅ 파일 경로

def migrate_students_courses(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    owns_session = db is None
    db = db or SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                completed = (row.get("completion_date") or "").strip()
                student_course = StudentCourseModel(
                    student_pin=row["student_pin"],                     # 학생 PIN
                    course_id=int(row["course_id"]),                    # 강좌 ID
                    # 빈 칸이면 미이수(NULL)
                    completion_date=datetime.fromisoformat(completed) if completed else None
                )
                db.add(student_course)
                count += 1

        db.commit()
    finally:
        if owns_session:
            db.close()
    print(f"✅ 이수 기록 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_students_courses()
