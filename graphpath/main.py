from typing import List, Dict, Optional
from datetime import datetime
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from graphpath.config import settings
from graphpath.models import *
from graphpath.helpers import *
from graphpath.algo_funcs import shortest_path, path_edge_ids

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# -----------------------------
# App Setup
# -----------------------------

app = FastAPI(
    title=settings.APP_TITLE,
    version="0.1.0",
    description=(
        "Backend for the interactive shortest-path graph tool.\n\n"
        "POST /shortestPath runs Dijkstra on an edge list sent by the client. "
        "The /addVertex, /addEdge, /run family keeps a graph workspace in memory; "
        "state resets on restart."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# Endpoints
# -----------------------------

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.post("/shortestPath", response_model=ShortestPathResponse, tags=["path"])
async def post_shortest_path(req: ShortestPathRequest) -> ShortestPathResponse:
    """
    Stateless query: the client sends its whole graph as an edge list.
    Weights are already validated as non-negative by the request schema.
    edge_ids are the positions of the path edges in req.edges, as strings.
    """
    result = shortest_path([(e.from_, e.to, e.weight) for e in req.edges], req.start, req.end)
    logger.info("shortestPath %s -> %s over %d edges: %s", req.start, req.end, len(req.edges), result.path)
    if not result.reachable:
        return ShortestPathResponse()
    labelled = [(str(i), e.from_, e.to, e.weight) for i, e in enumerate(req.edges)]
    return ShortestPathResponse(
        path=result.path,
        distance=result.distance,
        edge_ids=path_edge_ids(result.path, labelled),
    )

@app.get("/getGraph", response_model=Graph, tags=["graph"])
async def get_graph() -> Graph:
    return STATE["graph"]

@app.post("/addVertex", response_model=Vertex, status_code=201, tags=["graph"])
async def post_vertex(req: AddVertexRequest) -> Vertex:
    try:
        return add_vertex(req.label)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc))

@app.delete("/vertices/{vertex_id}", tags=["graph"])
async def remove_vertex(vertex_id: str) -> Dict[str, str]:
    try:
        delete_vertex(vertex_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Vertex not found")
    return {"status": "ok"}

@app.post("/addEdge", response_model=Edge, status_code=201, tags=["graph"])
async def post_edge(req: AddEdgeRequest) -> Edge:
    try:
        return add_edge(req.from_, req.to, req.weight)
    except KeyError:
        raise HTTPException(status_code=404, detail="from/to must be existing vertex ids")

@app.put("/edges/{edge_id}", response_model=Edge, tags=["graph"])
async def put_edge(edge_id: str, req: UpdateEdgeRequest) -> Edge:
    try:
        return update_edge_weight(edge_id, req.weight)
    except KeyError:
        raise HTTPException(status_code=404, detail="Edge not found")

@app.delete("/edges/{edge_id}", tags=["graph"])
async def remove_edge(edge_id: str) -> Dict[str, str]:
    try:
        delete_edge(edge_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Edge not found")
    return {"status": "ok"}

@app.post("/run", response_model=RunResponse, tags=["path"])
async def run(req: RunRequest) -> RunResponse:
    return run_shortest_path(req.start, req.end)

@app.post("/reset", tags=["graph"])
async def reset() -> Dict[str, str]:
    reset_workspace()
    return {"status": "ok"}

@app.get("/events", response_model=List[Event])
async def get_events(limit: Optional[int] = None, since: Optional[str] = None):
    """
    Retrieve events newest first, optionally limited and filtered by a 'since' timestamp (ISO 8601).
    """
    events = STATE.get("events", [])

    if since is not None:
        try:
            since_dt = datetime.fromisoformat(since.replace("Z", "+00:00"))
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid ISO 8601 timestamp for 'since'")
        if since_dt.tzinfo is None:
            raise HTTPException(status_code=400, detail="'since' must carry a timezone")
        events = [e for e in events if datetime.fromisoformat(e.time.replace("Z", "+00:00")) > since_dt]

    if limit is not None:
        events = events[-limit:] if limit > 0 else []

    return events[::-1]

# -----------------------------
# Run (if executed directly)
# -----------------------------

# Use: uvicorn graphpath.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "graphpath.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
