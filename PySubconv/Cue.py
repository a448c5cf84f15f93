from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

@dataclass
class Cue:
    """
    A timed caption entry in the internal format.

    Attributes:
        start (float): Seconds from the start of the stream
        end (float|None): Seconds from the start of the stream, None until it has been resolved
        lines (list[str]): Display rows, top to bottom
        metadata (dict[str, Any]): Format-specific data preserved for round trips
    """
    start : float
    end : float|None = None
    lines : list[str] = field(default_factory=list)
    metadata : dict[str, Any] = field(default_factory=dict)

    @classmethod
    def Construct(cls, start : float, end : float|None, text : str|list[str]|None, metadata : dict[str, Any]|None = None) -> Cue:
        """ Create a cue from a block of text or a list of lines """
        if text is None:
            lines = []
        elif isinstance(text, str):
            lines = text.split('\n')
        else:
            lines = list(text)
        return cls(start=start, end=end, lines=lines, metadata=dict(metadata or {}))

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

    @property
    def duration(self) -> float|None:
        if self.end is None:
            return None
        return self.end - self.start

    def __str__(self) -> str:
        end = f"{self.end:.3f}" if self.end is not None else "?"
        return f"{self.start:.3f} --> {end}: {' | '.join(self.lines)}"
