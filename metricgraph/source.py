"""
Graph source backed by a markdown file.

Compiles the file on demand and keeps the last result, keyed on the
file's modification time, so the compiler only reruns when the file
changes or a reload is forced.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path
from stat import S_ISREG
from typing import Any

from metricgraph.core.graph import GraphData
from metricgraph.hierarchy import HierarchyCompiler

logger = logging.getLogger(__name__)


class SourceUnavailableError(Exception):
    """The source document is missing or cannot be read."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "source_path": str(self.source_path) if self.source_path else None,
            "details": self.details,
        }


class GraphSource:
    """
    Cached graph for one source file.

    A missing file raises SourceUnavailableError; an empty file yields
    an empty graph.
    """

    def __init__(self, path: Path, compiler: HierarchyCompiler | None = None) -> None:
        self.path = Path(path)
        self._compiler = compiler or HierarchyCompiler()
        self._lock = threading.Lock()
        self._cached: GraphData | None = None
        self._cached_mtime: int | None = None

    @property
    def is_cached(self) -> bool:
        return self._cached is not None

    def _current_mtime(self) -> int:
        try:
            return self.path.stat().st_mtime_ns
        except FileNotFoundError as e:
            raise SourceUnavailableError(
                f"File not found: {self.path}",
                source_path=self.path,
            ) from e
        except OSError as e:
            raise SourceUnavailableError(
                f"Cannot access source: {self.path}",
                source_path=self.path,
                details=str(e),
            ) from e

    def get_graph(self) -> GraphData:
        """Return the graph, recompiling only if the file changed."""
        with self._lock:
            mtime = self._current_mtime()
            if self._cached is not None and self._cached_mtime == mtime:
                logger.debug("Returning cached graph for %s", self.path)
                return self._cached

            logger.info("Compiling %s", self.path)
            try:
                text = self.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise SourceUnavailableError(
                    f"Failed to read source: {self.path}",
                    source_path=self.path,
                    details=str(e),
                ) from e

            graph = self._compiler.compile(text)
            self._cached = graph
            self._cached_mtime = mtime
            logger.info(
                "Generated %d nodes and %d edges", len(graph.nodes), len(graph.edges)
            )
            return graph

    def invalidate(self) -> None:
        """Drop the cached graph."""
        with self._lock:
            self._cached = None
            self._cached_mtime = None

    def reload(self) -> GraphData:
        """Force a recompile from the current file contents."""
        self.invalidate()
        return self.get_graph()

    def status(self) -> dict[str, Any]:
        """Report file presence, modification time and cache state."""
        try:
            file_stat = self.path.stat()
        except OSError:
            file_stat = None

        exists = file_stat is not None and S_ISREG(file_stat.st_mode)
        last_modified = None
        if exists:
            last_modified = datetime.fromtimestamp(file_stat.st_mtime).isoformat()

        with self._lock:
            cached = self._cached
        return {
            "file": str(self.path),
            "exists": exists,
            "last_modified": last_modified,
            "cached": cached is not None,
            **(cached if cached is not None else GraphData()).stats(),
        }
