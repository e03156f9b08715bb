from tv_info.session import Session, State
from tv_info.prompt import Prompt
from tv_info.machine import run, step

__all__ = [
    "Session",
    "State",
    "Prompt",
    "run",
    "step",
]
