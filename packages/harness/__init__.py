from .core import GameSession, run_case
from .io import write_csv, write_manifest

__all__ = ["GameSession", "run_case", "write_csv", "write_manifest"]
