from typing import List
from datetime import datetime, timezone
import logging
import uuid

from graphpath.config import settings
from graphpath.models import *
from graphpath.algo_funcs import shortest_path, path_edge_ids

logger = logging.getLogger(__name__)

NO_EDGES_MESSAGE = "No edges in graph"
NO_PATH_MESSAGE = "No path found"

# -----------------------------
# Workspace editing
# -----------------------------

def _graph() -> Graph:
    return STATE["graph"]


def _new_id() -> str:
    return uuid.uuid4().hex


def _vertex(vertex_id: str) -> Vertex:
    v = next((v for v in _graph().nodes if v.id == vertex_id), None)
    if v is None:
        raise KeyError(f"Unknown vertex {vertex_id}")
    return v


def _edge(edge_id: str) -> Edge:
    e = next((e for e in _graph().edges if e.id == edge_id), None)
    if e is None:
        raise KeyError(f"Unknown edge {edge_id}")
    return e


def add_vertex(label: str) -> Vertex:
    if any(v.label == label for v in _graph().nodes):
        raise ValueError(f"Vertex label {label!r} already exists")
    vertex = Vertex(id=_new_id(), label=label)
    _graph().nodes.append(vertex)
    log_event("vertex_added", {"id": vertex.id, "label": label})
    return vertex


def delete_vertex(vertex_id: str) -> None:
    """Remove a vertex together with every edge touching it."""
    vertex = _vertex(vertex_id)
    graph = _graph()
    dropped = [e.id for e in graph.edges if vertex_id in (e.from_, e.to)]
    graph.edges = [e for e in graph.edges if e.id not in dropped]
    graph.nodes = [v for v in graph.nodes if v.id != vertex_id]
    log_event("vertex_deleted", {"id": vertex_id, "label": vertex.label, "edges": dropped})


def add_edge(from_id: str, to_id: str, weight: float) -> Edge:
    # parallel edges are allowed
    _vertex(from_id)
    _vertex(to_id)
    edge = Edge(id=_new_id(), from_=from_id, to=to_id, weight=weight)
    _graph().edges.append(edge)
    log_event("edge_added", {"id": edge.id, "from": from_id, "to": to_id, "weight": weight})
    return edge


def update_edge_weight(edge_id: str, weight: float) -> Edge:
    edge = _edge(edge_id)
    edge.weight = weight
    log_event("edge_updated", {"id": edge_id, "weight": weight})
    return edge


def delete_edge(edge_id: str) -> None:
    _edge(edge_id)
    graph = _graph()
    graph.edges = [e for e in graph.edges if e.id != edge_id]
    log_event("edge_deleted", {"id": edge_id})


def reset_workspace() -> None:
    STATE["graph"] = Graph()
    STATE["events"] = []

# -----------------------------
# Snapshots
# -----------------------------

def labelled_edges() -> List[LabelledEdge]:
    labels = {v.id: v.label for v in _graph().nodes}
    return [(e.id, labels[e.from_], labels[e.to], e.weight) for e in _graph().edges]


def edge_triples(edges: List[LabelledEdge]) -> List[EdgeTriple]:
    return [(u, v, w) for _, u, v, w in edges]


def snapshot_edges() -> List[EdgeTriple]:
    """Current edges as (from_label, to_label, weight), in insertion order."""
    return edge_triples(labelled_edges())


def run_shortest_path(start: str, end: str) -> RunResponse:
    edges = labelled_edges()
    if not edges:
        log_event("path_requested", {"start": start, "end": end, "found": False})
        return RunResponse(message=NO_EDGES_MESSAGE)

    result = shortest_path(edge_triples(edges), start, end)
    log_event("path_requested", {"start": start, "end": end, "found": result.reachable})
    if not result.reachable:
        return RunResponse(message=NO_PATH_MESSAGE)
    return RunResponse(
        path=result.path,
        distance=result.distance,
        edge_ids=path_edge_ids(result.path, edges),
    )

# logger
def log_event(type_: str, detail: dict):
    logger.info("%s %s", type_, detail)
    events = STATE["events"]
    events.append(Event(time=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"), type=type_, detail=detail))
    if len(events) > settings.EVENT_LOG_LIMIT:
        del events[: len(events) - settings.EVENT_LOG_LIMIT]
