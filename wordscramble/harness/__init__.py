from .core import replay_session, summarize, RESET_COMMAND
from .io import write_csv, write_manifest

__all__ = ["replay_session", "summarize", "RESET_COMMAND", "write_csv", "write_manifest"]
