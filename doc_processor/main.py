#!/usr/bin/env python3
"""
FastMCP server entrypoint for the doc-processor MCP service.

Tools:
  markdown_to_word        convert a Markdown file into a .docx document
  write_markdown_to_word  write Markdown text content into a .docx document

Environment variables:
  DOC_PROCESSOR_CONFIG (optional JSON config file, default: doc_processor/config.json)
  DOC_PROCESSOR_LOG_LEVEL (default: INFO)
  DOC_PROCESSOR_SOURCE_ENCODING (default: utf-8)
  DOC_PROCESSOR_GFM (tables and strikethrough, default: true)

Optional MCP runtime:
  MCP_TRANSPORT (stdio | sse | streamable-http, default: stdio)
  MCP_HOST (default: 127.0.0.1)
  MCP_PORT (default: 8000)

Run:
  python3 -m doc_processor.main
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .common.config import get_settings
from .common.logging import get_logger, setup_logging
from .runtime import SERVER_NAME, McpRuntimeConfig, get_mcp_runtime_config
from .tools import register_all

logger = get_logger(__name__)


def build_server(runtime: McpRuntimeConfig | None = None) -> FastMCP:
    runtime = runtime or get_mcp_runtime_config()
    mcp = FastMCP(SERVER_NAME, host=runtime.host, port=runtime.port)
    register_all(mcp)
    return mcp


def main() -> None:
    setup_logging(get_settings().log_level)
    runtime = get_mcp_runtime_config()
    mcp = build_server(runtime)
    logger.info("文档处理 MCP 服务器运行中 (transport=%s)", runtime.transport)
    mcp.run(transport=runtime.transport)


if __name__ == "__main__":
    main()
