from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DocProcessorError(Exception):
    """统一异常结构，便于对外返回标准化错误信息。"""

    code: str
    message: str
    detail: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """转换为 JSON 可序列化字典。"""
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload


class DocumentSerializationError(RuntimeError):
    """python-docx 无法生成文档容器。"""


class ErrorCodes:
    """预定义错误码。"""

    INVALID_PARAMS = "INVALID_PARAMS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
