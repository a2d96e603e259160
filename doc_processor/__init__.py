"""Markdown 转 Word 文档的 MCP 服务。"""

__version__ = "1.0.0"
