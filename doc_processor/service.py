"""对外的两个转换操作：文件转换与文本内容转换。

参数缺失直接返回 INVALID_PARAMS，不执行流水线；读取、解析、序列化、写盘
任一环节失败都包装为 INTERNAL_ERROR，并保留原始异常信息。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .common.config import DocProcessorSettings, get_settings
from .common.errors import DocProcessorError, ErrorCodes
from .common.logging import get_logger
from .converter import convert_markdown

logger = get_logger(__name__)

MISSING_PARAMS_MESSAGE = "缺少必要的参数"


@dataclass
class ConversionResult:
    """转换结果，message 为面向调用方的提示文本。"""

    output_path: Path
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "message": self.message, "output_path": str(self.output_path)}


def _require(*values: Optional[str]) -> None:
    if any(not isinstance(value, str) or value == "" for value in values):
        raise DocProcessorError(ErrorCodes.INVALID_PARAMS, MISSING_PARAMS_MESSAGE)


def _internal_error(prefix: str, exc: Exception) -> DocProcessorError:
    return DocProcessorError(
        ErrorCodes.INTERNAL_ERROR,
        f"{prefix}: {exc}",
        detail={"type": type(exc).__name__},
    )


def markdown_to_word(
    markdown_path: Optional[str],
    output_path: Optional[str],
    settings: Optional[DocProcessorSettings] = None,
) -> ConversionResult:
    """读取 Markdown 文件并转换为 Word 文档。"""
    _require(markdown_path, output_path)
    try:
        settings = settings or get_settings()
        source = Path(markdown_path).read_text(encoding=settings.source_encoding)
        source = source.removeprefix("\ufeff")
        target = convert_markdown(source, Path(output_path), gfm=settings.gfm)
    except Exception as exc:
        logger.exception("Failed to convert %s", markdown_path)
        raise _internal_error("处理文件失败", exc) from exc
    return ConversionResult(output_path=target, message=f"成功将Markdown文件转换为Word文档: {output_path}")


def write_markdown_to_word(
    content: Optional[str],
    output_path: Optional[str],
    settings: Optional[DocProcessorSettings] = None,
) -> ConversionResult:
    """把 Markdown 文本内容直接写成 Word 文档。"""
    _require(content, output_path)
    try:
        settings = settings or get_settings()
        target = convert_markdown(content, Path(output_path), gfm=settings.gfm)
    except Exception as exc:
        logger.exception("Failed to write document to %s", output_path)
        raise _internal_error("创建文档失败", exc) from exc
    return ConversionResult(output_path=target, message=f"成功创建Word文档: {output_path}")
