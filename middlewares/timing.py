import time


class Timer:
    """with 블록 실행 시간을 ms 단위로 측정 (블록 안에서도 중간값 조회 가능)"""

    def __enter__(self):
        self.start = time.perf_counter()
        self.end = None
        return self

    def __exit__(self, exc_type, exc, tb):
        self.end = time.perf_counter()
        return False

    @property
    def latency_ms(self) -> int:
        end = self.end if self.end is not None else time.perf_counter()
        return int((end - self.start) * 1000)
