"""嵌套列表修复：把“编号加粗条目 + 顶格短横线条目”改写为标准嵌套列表。

常见写法::

    1. **步骤**
    - 子项 a
    - 子项 b

markdown 解析器会把短横线行当成与编号列表平级的新列表。这里给这些行补上
三个空格缩进，使其成为编号条目的子列表。其他行原样输出。
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..common.logging import get_logger

MAIN_ITEM_RE = re.compile(r"^(\d+)\.\s+\*\*(.+)\*\*$")
NESTED_DASH_RE = re.compile(r"^-\s+(.+)$")
NESTED_INDENT = "   "

logger = get_logger(__name__)


def normalize_nested_lists(markdown: str) -> str:
    lines = markdown.split("\n")
    output: List[str] = []
    current_item: Optional[int] = None
    in_nested_run = False
    repaired_runs = 0

    for line in lines:
        stripped = line.strip()
        main_match = MAIN_ITEM_RE.match(stripped)
        dash_match = NESTED_DASH_RE.match(stripped)

        if main_match:
            current_item = int(main_match.group(1))
            in_nested_run = False
            output.append(line)
        elif dash_match and current_item is not None:
            if not in_nested_run:
                in_nested_run = True
                repaired_runs += 1
            output.append(f"{NESTED_INDENT}- {dash_match.group(1)}")
        else:
            if not stripped:
                # 空行只结束当前子列表，编号条目仍然有效
                in_nested_run = False
            output.append(line)

    if repaired_runs:
        logger.debug("Re-indented %d nested list run(s)", repaired_runs)
    return "\n".join(output)
