# main.py
import logging
import threading
import uuid
from typing import Dict, List

import uvicorn
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from algorithms.commands.controller import RobotController
from algorithms.entities.grid import Grid
from algorithms.entities.robot import Robot
from algorithms.protocol.session import format_result, play_session, summarize
from algorithms.utils.consts import (
    LOG_FORMAT,
    MAX_COORDINATE,
    MAX_INSTRUCTION_LENGTH,
    SERVER_HOST,
    SERVER_PORT,
)
from algorithms.utils.enums import Direction
from algorithms.utils.errors import MarsRoverError

logger = logging.getLogger(__name__)

app = FastAPI(title="Martian Robots Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class GridInput(BaseModel):
    # Range is checked by Grid so the caller gets the engine's message
    max_x: int
    max_y: int

class ScentPoint(BaseModel):
    x: int
    y: int
    d: str

class GridOutput(BaseModel):
    grid_id: str
    max_x: int
    max_y: int
    scents: List[ScentPoint]

class RobotInput(BaseModel):
    x: int
    y: int
    d: str                  # N / E / S / W, any case
    instructions: str = ""

class RobotOutput(BaseModel):
    x: int
    y: int
    d: str
    lost: bool
    output: str             # "X Y D" or "X Y D LOST"

class SessionInput(BaseModel):
    transcript: str = Field(..., description="Grid line, then robot start/instruction line pairs")

class SessionOutput(BaseModel):
    lines: List[str]
    processed: int          # robots run
    lost: int               # robots that fell off the grid


# =============================================================================
# GRID SESSIONS
# =============================================================================

class GridRegistry:
    """
    In-memory grids, one per session.
    Each grid serializes its own robot runs via Grid.lock.
    """

    def __init__(self):
        self._grids: Dict[str, Grid] = {}
        self._lock = threading.Lock()

    def create(self, max_x: int, max_y: int) -> str:
        grid = Grid(max_x, max_y)
        grid_id = uuid.uuid4().hex
        with self._lock:
            self._grids[grid_id] = grid
        logger.info("Created grid %s (%d x %d)", grid_id, max_x, max_y)
        return grid_id

    def get(self, grid_id: str) -> Grid:
        with self._lock:
            grid = self._grids.get(grid_id)
        if grid is None:
            raise KeyError(grid_id)
        return grid

    def remove(self, grid_id: str) -> None:
        with self._lock:
            del self._grids[grid_id]
        logger.info("Removed grid %s", grid_id)

    def clear(self) -> None:
        with self._lock:
            self._grids.clear()

    def __len__(self) -> int:
        return len(self._grids)


registry = GridRegistry()


def _grid_output(grid_id: str, grid: Grid) -> dict:
    return {"grid_id": grid_id, **grid.get_dict()}


def _lookup(grid_id: str) -> Grid:
    try:
        return registry.get(grid_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown grid: {grid_id}")


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {
        "status": "ok",
        "message": "Martian robots server is running",
        "grids": len(registry),
        "max_coordinate": MAX_COORDINATE,
        "max_instruction_length": MAX_INSTRUCTION_LENGTH - 1,
    }


@app.post("/grids", response_model=GridOutput, status_code=201)
def create_grid(input_data: GridInput):
    try:
        grid_id = registry.create(input_data.max_x, input_data.max_y)
    except MarsRoverError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _grid_output(grid_id, registry.get(grid_id))


@app.get("/grids/{grid_id}", response_model=GridOutput)
def get_grid(grid_id: str):
    return _grid_output(grid_id, _lookup(grid_id))


@app.delete("/grids/{grid_id}", status_code=204)
def delete_grid(grid_id: str):
    try:
        registry.remove(grid_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown grid: {grid_id}")
    return Response(status_code=204)


@app.post("/grids/{grid_id}/robots", response_model=RobotOutput)
def run_robot(grid_id: str, input_data: RobotInput):
    grid = _lookup(grid_id)
    try:
        robot = Robot(input_data.x, input_data.y, Direction.from_letter(input_data.d))
        result = RobotController(grid).run_robot(robot, input_data.instructions)
    except MarsRoverError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Robot run failed on grid %s", grid_id)
        raise HTTPException(status_code=500, detail=str(e))
    return {**result.get_dict(), "output": format_result(result)}


@app.post("/sessions", response_model=SessionOutput)
def run_transcript(input_data: SessionInput):
    try:
        results = play_session(input_data.transcript)
        processed, lost = summarize(results)
        logger.info("Session done: %d robot(s) processed, %d lost", processed, lost)
        return {
            "lines": [format_result(r) for r in results],
            "processed": processed,
            "lost": lost,
        }
    except MarsRoverError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Session failed")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
