"""
Result model for build emitters.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EmitResult:
    """
    Data model representing the outcome of one emitter run.
    """

    emitter: str
    success: bool
    files_written: int = 0
    output_path: Optional[str] = None
    skipped: bool = False
    error_message: Optional[str] = None
