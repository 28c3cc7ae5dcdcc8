from typing import List, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# -----------------------------
# Domain Models (Pydantic)
# -----------------------------

# (from_label, to_label, weight) as handed to the engine
EdgeTriple = Tuple[str, str, float]

# (edge_id, from_label, to_label, weight) used to map a path back onto edges
LabelledEdge = Tuple[str, str, str, float]


class PathResult(BaseModel):
    path: Optional[List[str]] = None
    distance: float = float("inf")

    @property
    def reachable(self) -> bool:
        return self.path is not None

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(path=None, distance=float("inf"))


class Vertex(BaseModel):
    id: str
    label: str


class Edge(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str
    from_: str = Field(alias="from")
    to: str
    weight: float = Field(default=1.0, ge=0)


class Graph(BaseModel):
    nodes: List[Vertex] = []
    edges: List[Edge] = []


class Event(BaseModel):
    time: str
    type: str
    detail: dict

# -----------------------------
# API Schemas
# -----------------------------

class EdgeIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    weight: float = Field(ge=0)


class ShortestPathRequest(BaseModel):
    edges: List[EdgeIn]
    start: str
    end: str


class ShortestPathResponse(BaseModel):
    path: Optional[List[str]] = None
    distance: Optional[float] = None  # null when unreachable
    edge_ids: List[str] = []


class AddVertexRequest(BaseModel):
    label: str = Field(min_length=1)


class AddEdgeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    weight: float = Field(default=1.0, ge=0)


class UpdateEdgeRequest(BaseModel):
    weight: float = Field(ge=0)


class RunRequest(BaseModel):
    start: str
    end: str


class RunResponse(ShortestPathResponse):
    message: Optional[str] = None

# -----------------------------
# In-memory State (resets on restart)
# -----------------------------

STATE: Dict[str, object] = {
    "graph": Graph(),
    "events": [],
}
