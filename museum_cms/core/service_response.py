# museum_cms/core/service_response.py

"""
서비스 계층의 결과 봉투(envelope)를 정의합니다.

서비스는 도메인 결과(성공/실패)만 돌려주고, HTTP 상태 코드 선택은
컨트롤러(museum_cms.core.controller)에서만 이루어집니다.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ServiceResponse(BaseModel):
    success: bool = True
    content: Any = None

    @classmethod
    def ok(cls, content: Any = None) -> "ServiceResponse":
        return cls(success=True, content=content if content is not None else {})

    @classmethod
    def fail(cls, error: str) -> "ServiceResponse":
        return cls(success=False, content={"error": error})

    @property
    def error(self) -> Optional[str]:
        """실패 봉투의 오류 메시지. 성공이면 None."""
        if self.success or not isinstance(self.content, dict):
            return None
        return self.content.get("error")
