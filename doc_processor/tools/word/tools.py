from __future__ import annotations

import asyncio
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ...common.errors import DocProcessorError
from ... import service

_WRITE_ANNOTATIONS = {
    "readOnlyHint": False,
    "destructiveHint": True,
    "idempotentHint": True,
    "openWorldHint": False,
}


def _error_response(exc: DocProcessorError) -> dict[str, Any]:
    return {"ok": False, "error": exc.to_dict()}


def register_tools(mcp: FastMCP) -> None:
    @mcp.tool(
        name="markdown_to_word",
        title="Markdown 文件转 Word",
        description="将Markdown文件转换为Word文档",
        annotations=_WRITE_ANNOTATIONS,
    )
    async def markdown_to_word(
        markdown_path: Annotated[
            str,
            Field(description="Markdown文件路径", title="Markdown 路径"),
        ] = "",
        output_path: Annotated[
            str,
            Field(description="Word文档输出路径", title="输出路径"),
        ] = "",
    ) -> dict[str, Any]:
        """读取 Markdown 文件并写出 docx。"""
        try:
            result = await asyncio.to_thread(service.markdown_to_word, markdown_path, output_path)
        except DocProcessorError as exc:
            return _error_response(exc)
        return result.to_dict()

    @mcp.tool(
        name="write_markdown_to_word",
        title="Markdown 内容写入 Word",
        description="将Markdown文本内容写入Word文档",
        annotations=_WRITE_ANNOTATIONS,
    )
    async def write_markdown_to_word(
        content: Annotated[
            str,
            Field(description="Markdown格式的文本内容", title="Markdown 内容"),
        ] = "",
        output_path: Annotated[
            str,
            Field(description="Word文档输出路径", title="输出路径"),
        ] = "",
    ) -> dict[str, Any]:
        """把 Markdown 文本直接写成 docx。"""
        try:
            result = await asyncio.to_thread(service.write_markdown_to_word, content, output_path)
        except DocProcessorError as exc:
            return _error_response(exc)
        return result.to_dict()
