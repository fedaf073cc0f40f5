from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기

# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성 (실제 연결은 첫 쿼리 시점)
engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ✅ 리포트 1회 실행 동안만 세션을 잡고, 어떤 경로로 끝나든 반드시 반환
@contextmanager
def get_db(session_factory=SessionLocal) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
