# museum_cms/core/exceptions.py

"""
서비스 계층에서 발생시키는 도메인 예외입니다.
"""


class ServiceError(Exception):
    """서비스 계층 예외의 기본 클래스."""
    pass


class DuplicateKeyError(ServiceError):
    """저장소의 고유 인덱스가 중복 키 쓰기를 거부한 경우."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate value for unique field '{field}': {value!r}")
