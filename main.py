# main.py
import os
import threading
import uvicorn
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tabletop.commands.interpreter import CommandInterpreter, CommandResult
from tabletop.entities.board import Board
from tabletop.entities.robot import Robot
from tabletop.utils.consts import ENV_MAX_X, ENV_MAX_Y, MAX_X, MAX_Y

app = FastAPI(title="Tabletop Robot Server")

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

class CommandInput(BaseModel):
    line: str

class CommandsInput(BaseModel):
    lines: List[str]

class PositionOutput(BaseModel):
    placed: bool
    x: Optional[int] = None
    y: Optional[int] = None
    d: Optional[int] = None       # Angle: 0=NORTH, 90=EAST, 180=SOUTH, 270=WEST
    facing: Optional[str] = None

class CommandOutput(BaseModel):
    command: Optional[str] = None  # None when the line was not recognised
    applied: bool
    report: Optional[str] = None
    position: PositionOutput

class CommandsOutput(BaseModel):
    results: List[CommandOutput]
    position: PositionOutput


# =============================================================================
# SIMULATOR STATE
# =============================================================================

def _bound_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = None
    # Board bounds must be non-negative integers
    if value is None or value < 0:
        print(f"[Tabletop Server] Ignoring {name}={raw!r}, using {default}")
        return default
    return value


board = Board(_bound_from_env(ENV_MAX_X, MAX_X), _bound_from_env(ENV_MAX_Y, MAX_Y))
# REPORT output goes back in the response, not to the server console
interpreter = CommandInterpreter(Robot(board), output=None)
# Handlers run on a thread pool; one command at a time touches the robot
robot_lock = threading.Lock()


def position_output() -> dict:
    position = interpreter.robot.report()
    if position is None:
        return {"placed": False}
    return {"placed": True, **position.get_dict()}


def command_output(result: CommandResult) -> dict:
    return {
        "command": result.command.name if result.command is not None else None,
        "applied": result.applied,
        "report": result.report,
        "position": position_output(),
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {
        "status": "ok",
        "message": f"Tabletop server is running ({board})",
        "board": {"max_x": board.max_x, "max_y": board.max_y},
    }


@app.get("/position", response_model=PositionOutput)
def get_position():
    with robot_lock:
        return position_output()


@app.post("/command", response_model=CommandOutput)
def run_command(input_data: CommandInput):
    try:
        with robot_lock:
            result = interpreter.run_line(input_data.line)
            return command_output(result)
    except Exception as e:
        import traceback; traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/commands", response_model=CommandsOutput)
def run_commands(input_data: CommandsInput):
    """Apply a batch of lines in order, as if replayed from a file."""
    try:
        with robot_lock:
            results = [command_output(interpreter.run_line(line)) for line in input_data.lines]
            return {"results": results, "position": position_output()}
    except Exception as e:
        import traceback; traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/reset", response_model=PositionOutput)
def reset_robot():
    with robot_lock:
        interpreter.robot.reset()
        print("[Tabletop Server] Robot reset to unplaced state")
        return position_output()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=5000)
