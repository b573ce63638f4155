from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple
import math

from netlat.errors import InvalidEdge


# Signal propagation speed in meters per second.
COPPER_SPEED_M_S = 230_000_000
FIBER_SPEED_M_S = 200_000_000


class Material(str, Enum):
    """Physical medium of a cable."""

    COPPER = "copper"
    OPTICAL = "optical"

    @classmethod
    def parse(cls, value: Any) -> "Material":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidEdge(f"unrecognized material {value!r} (expected copper or optical)") from e


def latency_ns(material: Material, length_m: float) -> float:
    """Travel time in nanoseconds over `length_m` meters of `material`."""
    speed = COPPER_SPEED_M_S if material is Material.COPPER else FIBER_SPEED_M_S
    return length_m * 1e9 / speed


def _as_index(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEdge(f"{name} must be an integer vertex index, got {value!r}")
    if value < 0:
        raise InvalidEdge(f"{name} must be a nonnegative integer, got {value}")
    return value


@dataclass(frozen=True, eq=False)
class Edge:
    """Directed link between two vertices, one travel direction of a cable.

    Edges compare by latency so that ``sorted(edges)`` gives the greedy order
    used by Kruskal. Equality stays identity based: two cables with the same
    endpoints and latency are still different edges.
    """

    source: int
    destination: int
    material: Material
    length_m: float
    bandwidth: int = 0
    latency: float = field(init=False)

    def __post_init__(self) -> None:
        _as_index("source", self.source)
        _as_index("destination", self.destination)
        object.__setattr__(self, "material", Material.parse(self.material))

        try:
            length = float(self.length_m)
        except (TypeError, ValueError) as e:
            raise InvalidEdge(f"length must be numeric, got {self.length_m!r}") from e
        if math.isnan(length):
            raise InvalidEdge("length is NaN")
        if length < 0:
            raise InvalidEdge(f"length cannot be negative: {length} m")
        object.__setattr__(self, "length_m", length)

        if isinstance(self.bandwidth, bool) or not isinstance(self.bandwidth, int) or self.bandwidth < 0:
            raise InvalidEdge(f"bandwidth must be a nonnegative integer, got {self.bandwidth!r}")

        object.__setattr__(self, "latency", latency_ns(self.material, length))

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.latency < other.latency

    @property
    def is_copper(self) -> bool:
        return self.material is Material.COPPER

    def reversed(self) -> "Edge":
        """The opposite travel direction of the same cable."""
        return Edge(self.destination, self.source, self.material, self.length_m, self.bandwidth)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "material": self.material.value,
            "length_m": self.length_m,
            "bandwidth": self.bandwidth,
            "latency_ns": self.latency,
        }

    def __str__(self) -> str:
        return f"{self.source}->{self.destination} {self.latency:5.2f}"

    def __repr__(self) -> str:
        return (
            f"Edge({self.source}->{self.destination}, {self.material.value}, "
            f"{self.length_m:g} m, bw={self.bandwidth}, {self.latency:.2f} ns)"
        )


@dataclass(frozen=True)
class CableRecord:
    """One physical cable from the network file (one input line)."""

    source: int
    destination: int
    material: Material
    bandwidth: int
    length_m: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CableRecord":
        """Create a CableRecord from a parsed row.

        Expected keys: source, destination, material, bandwidth, length_m.
        Values may be strings straight from the file.
        """
        norm = {str(k).strip().lower(): v for k, v in data.items()}

        def req(key: str) -> str:
            val = norm.get(key)
            if val is None or (isinstance(val, float) and math.isnan(val)):
                raise InvalidEdge(f"missing required field '{key}'")
            val = str(val).strip()
            if not val:
                raise InvalidEdge(f"empty required field '{key}'")
            return val

        def as_int(key: str) -> int:
            raw = req(key)
            try:
                return int(raw)
            except ValueError as e:
                raise InvalidEdge(f"invalid integer for '{key}': {raw!r}") from e

        def as_float(key: str) -> float:
            raw = req(key)
            try:
                return float(raw)
            except ValueError as e:
                raise InvalidEdge(f"invalid number for '{key}': {raw!r}") from e

        return cls(
            source=as_int("source"),
            destination=as_int("destination"),
            material=Material.parse(req("material")),
            bandwidth=as_int("bandwidth"),
            length_m=as_float("length_m"),
        )

    def to_edges(self) -> Tuple[Edge, Edge]:
        """Both travel directions of the cable, sharing material, length and bandwidth."""
        forward = Edge(self.source, self.destination, self.material, self.length_m, self.bandwidth)
        return forward, forward.reversed()
