"""
Platform capability flags, computed once at import time and never changed.
"""
import os
import sys

# Windows-family systems use `clip` and cannot replace the current process image
IS_WINDOWS = sys.platform == "win32"

CAN_EXEC = not IS_WINDOWS and hasattr(os, "execv")
