from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple
import logging

from netlat.errors import InvalidEdge, NetworkError
from netlat.models import CableRecord
from netlat.topology.graph import Graph


logger = logging.getLogger(__name__)

FIELDS = ("source", "destination", "material", "bandwidth", "length_m")


class EdgeListReader:
    """Reads a network file into a Graph.

    Format: the vertex count on the first line, then one cable per line as
    ``source destination material bandwidth length``. Each cable is inserted
    in both directions. Blank lines and ``#`` comments are ignored.
    """

    def __init__(self, filepath: str, strict: bool = True):
        self.filepath = Path(filepath)
        self.strict = strict
        self.skipped: List[Tuple[int, str]] = []

    def _lines(self) -> Iterator[Tuple[int, List[str]]]:
        try:
            with self.filepath.open("r", encoding="utf-8-sig") as f:
                for lineno, raw in enumerate(f, start=1):
                    text = raw.split("#", 1)[0].strip()
                    if text:
                        yield lineno, text.split()
        except UnicodeDecodeError as e:
            raise InvalidEdge(f"{self.filepath}: file is not valid UTF-8 text ({e.reason})") from e

    def read(self) -> Graph:
        """Parse the file and return the populated graph."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"Network file not found: {self.filepath}")

        self.skipped = []
        lines = self._lines()
        header = next(lines, None)
        if header is None:
            raise InvalidEdge(f"{self.filepath}: empty network file, expected vertex count on the first line")
        lineno, tokens = header
        if len(tokens) != 1 or not (tokens[0].isascii() and tokens[0].isdigit()):
            raise InvalidEdge(f"{self.filepath}:{lineno}: expected a nonnegative vertex count, got {' '.join(tokens)!r}")
        graph = Graph(int(tokens[0]))

        for lineno, tokens in lines:
            try:
                if len(tokens) != len(FIELDS):
                    raise InvalidEdge(f"expected {len(FIELDS)} fields, got {len(tokens)}")
                record = CableRecord.from_dict(dict(zip(FIELDS, tokens)))
                forward, backward = record.to_edges()
                # both endpoints are checked before either direction goes in
                graph.validate_vertex(forward.source)
                graph.validate_vertex(forward.destination)
                graph.add_edge(forward)
                graph.add_edge(backward)
            except NetworkError as e:
                if self.strict:
                    if isinstance(e, InvalidEdge):
                        raise InvalidEdge(f"{self.filepath}:{lineno}: {e}") from e
                    raise
                # Keep going; a bad row shouldn't kill the whole network
                logger.warning("skipping invalid cable at line %d: %s", lineno, e)
                self.skipped.append((lineno, str(e)))

        logger.info(
            "loaded %s: %d vertices, %d directed edges (%d row(s) skipped)",
            self.filepath, graph.V, graph.E, len(self.skipped),
        )
        return graph


def read_network(filepath: str, strict: bool = True) -> Graph:
    return EdgeListReader(filepath, strict=strict).read()
