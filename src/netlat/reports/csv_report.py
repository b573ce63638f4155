from __future__ import annotations

from typing import Iterable

import pandas as pd

from netlat.models import Edge


def edges_frame(edges: Iterable[Edge]) -> pd.DataFrame:
    rows = [e.to_dict() for e in edges]
    columns = ["source", "destination", "material", "length_m", "bandwidth", "latency_ns"]
    return pd.DataFrame(rows, columns=columns)


def write_edges_csv(edges: Iterable[Edge], output_path: str) -> pd.DataFrame:
    """Per-edge CSV (one row per selected edge), latency rounded to 3 decimals."""
    df = edges_frame(edges)
    df["latency_ns"] = df["latency_ns"].round(3)
    df.to_csv(output_path, index=False)
    return df
