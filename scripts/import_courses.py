import csv
import os
from typing import Optional

from sqlalchemy.orm import Session
from config.settings import settings
from database.db import SessionLocal
from models.courses import Course as CourseModel  # ✅ 모델 import
import models.students_courses  # noqa: F401  관계 매핑(StudentCourse) 등록

CSV_PATH = os.path.join(settings.DATA_DIR, "courses.csv")  # ✅ 파일 경로

def migrate_courses(csv_path: str = CSV_PATH, db: Optional[Session] = None) -> int:
    owns_session = db is None
    db = db or SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                course = CourseModel(
                    id=int(row["id"]),                          # 강좌 고유 ID
                    name=row["name"],                           # 강좌 이름
                    instructor_id=int(row["instructor_id"]),    # 담당 강사 ID
                    total_time=int(row["total_time"]),          # 총 수업 시간
                    credit=int(row["credit"])                   # 학점
                )
                db.add(course)
                count += 1

        db.commit()
    finally:
        if owns_session:
            db.close()
    print(f"✅ 강좌 정보 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_courses()
