from __future__ import annotations

from typing import Any

from PySubconv.Cue import Cue


class SubtitleData:
    """
    Format-agnostic container for cues and file-level metadata.

    Attributes:
        lines (list[Cue]): Cues in the internal format
        metadata (dict[str, Any]): File-level metadata extracted from or required by specific formats
        detected_format (str|None): Optional detected file format/extension (e.g. '.scc')
    """

    def __init__(self, lines : list[Cue]|None = None, metadata : dict[str, Any]|None = None, detected_format : str|None = None):
        self.lines : list[Cue] = lines or []
        self.metadata : dict[str, Any] = metadata or {}
        self.detected_format : str|None = detected_format
