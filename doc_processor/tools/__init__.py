from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .word import register_tools as register_word_tools


def register_all(mcp: FastMCP) -> None:
    register_word_tools(mcp)
