"""
Pytest configuration and fixtures for metricgraph tests.
"""

from pathlib import Path

import pytest

from metricgraph.core.graph import GraphData
from metricgraph.hierarchy import transform

SAMPLE_OUTLINE = """\
# 外卖业务GMV

## 1. DAU
### 1.1 闪购DAU
#### 1.1.1 分端-APP
- 新用户
  - 红包渠道
  - 补贴力度
- 老用户

## 2. 访购率
### 2.1 商品丰富度
"""


@pytest.fixture
def sample_outline() -> str:
    """A small metric tree mixing numbered headings and nested lists."""
    return SAMPLE_OUTLINE


@pytest.fixture
def sample_graph(sample_outline: str) -> GraphData:
    """The compiled sample outline."""
    return transform(sample_outline)


@pytest.fixture
def source_file(tmp_path: Path, sample_outline: str) -> Path:
    """Write the sample outline to a temporary markdown file."""
    path = tmp_path / "datas.md"
    path.write_text(sample_outline, encoding="utf-8")
    return path
