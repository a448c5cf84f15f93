from __future__ import annotations

from copy import deepcopy
import os
import logging
import threading
from typing import Any

from PySubconv.Cue import Cue
from PySubconv.Helpers import GetInputPath, GetOutputPath
from PySubconv.SettingsType import SettingsType
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import SubtitleError, SubtitleParseError, FormatError
from PySubconv.SubtitleFileHandler import SubtitleFileHandler, default_encoding
from PySubconv.SubtitleFormatRegistry import SubtitleFormatRegistry

class Subtitles:
    """
    High level class for loading, editing and converting subtitles.

    Holds the cues in the internal format, in order of start time, together with
    any file-level metadata the source format provided.
    """

    def __init__(self, filepath: str|None = None, outputpath: str|None = None, settings: SettingsType|None = None) -> None:
        self.cues : list[Cue] = []
        self.lock = threading.RLock()

        self.sourcepath : str|None = GetInputPath(filepath)
        self.outputpath : str|None = outputpath or None

        self.metadata : dict[str, Any] = {}
        self.file_format : str|None = None

        self.settings : SettingsType = SettingsType(deepcopy(settings)) if settings else SettingsType()

    @property
    def has_subtitles(self) -> bool:
        return self.linecount > 0

    @property
    def linecount(self) -> int:
        with self.lock:
            return len(self.cues)

    def LoadSubtitles(self, filepath: str|None = None) -> None:
        """
        Load subtitles from a file, using the file extension to choose the format
        """
        if filepath:
            self.sourcepath = GetInputPath(filepath)

        if not self.sourcepath:
            raise ValueError("No source path set for subtitles")

        if not os.path.exists(self.sourcepath):
            raise SubtitleError(f"File does not exist: {self.sourcepath}")

        extension = SubtitleFormatRegistry.get_format_from_filename(self.sourcepath)
        try:
            handler_class = SubtitleFormatRegistry.get_handler_by_extension(extension or '.')
        except ValueError:
            handler_class = None

        if handler_class is None:
            logging.warning(f"Unrecognised file extension '{extension or ''}'... attempting format detection")
            data = SubtitleFormatRegistry.detect_format_and_load_file(self.sourcepath, self.settings)

        else:
            file_handler : SubtitleFileHandler = handler_class(self.settings)
            try:
                data = file_handler.load_file(self.sourcepath)

            except FormatError:
                raise

            except SubtitleParseError as e:
                logging.debug(f"Error parsing file: {e}")
                logging.warning("Error parsing file... attempting format detection")
                data = SubtitleFormatRegistry.detect_format_and_load_file(self.sourcepath, self.settings)

        self._set_data(data)

        if self.outputpath is None:
            self.outputpath = GetOutputPath(self.sourcepath, self.file_format)

    def LoadSubtitlesFromString(self, subtitles_string: str, file_handler: SubtitleFileHandler|None = None) -> None:
        """
        Load subtitles from a string, detecting the format from the content if no handler is given
        """
        if file_handler is None:
            extension = SubtitleFormatRegistry.detect_format_from_content(subtitles_string)
            file_handler = SubtitleFormatRegistry.create_handler(extension, settings=self.settings)

        data = file_handler.parse_string(subtitles_string)
        self._set_data(data)

    def GetContent(self, format: str) -> str:
        """
        Compose the subtitles in the given format (a file extension such as '.scc')
        """
        file_handler = SubtitleFormatRegistry.create_handler(format, settings=self.settings)

        with self.lock:
            data = SubtitleData(lines=self.cues, metadata=self.metadata)
            return file_handler.compose(data)

    def SaveSubtitles(self, outputpath: str|None = None, format: str|None = None) -> None:
        """
        Write the subtitles to a file. The format is taken from the file extension unless specified.
        """
        outputpath = outputpath or self.outputpath
        if not outputpath:
            raise SubtitleError("No output path specified")

        outputpath = os.path.normpath(outputpath)
        format = format or SubtitleFormatRegistry.get_format_from_filename(outputpath)
        if not format:
            raise SubtitleError(f"Unable to determine the output format for {outputpath}")

        if not self.has_subtitles:
            logging.warning(f"No subtitles to save to {outputpath}")

        content = self.GetContent(format)

        logging.info(f"Saving {self.linecount} cues to {outputpath}")

        with open(outputpath, 'w', encoding=default_encoding, newline='') as f:
            f.write(content)

        self.outputpath = outputpath

    def AddCue(self, start : float, end : float, text : str|list[str]) -> Cue:
        """
        Add a cue, keeping the cues in order of start time
        """
        if end < start:
            raise ValueError(f"Cue end {end} is before start {start}")

        cue = Cue.Construct(start, end, text)
        with self.lock:
            self.cues.append(cue)
            self.SortCues()
        return cue

    def RemoveCues(self, start : float, end : float) -> None:
        """
        Remove cues that start or end strictly inside the interval
        """
        with self.lock:
            self.cues = [ cue for cue in self.cues if not self._overlaps(cue, start, end) ]

    def Trim(self, start : float, end : float) -> None:
        """
        Remove cues before start and after end
        """
        with self.lock:
            self.RemoveCues(0, start)
            self.RemoveCues(end, self.MaxTime())

    def ShiftTime(self, seconds : float, start : float = 0, end : float|None = None) -> None:
        """
        Move cues that are displayed between start and end by a fixed number of seconds
        """
        with self.lock:
            for cue in self.cues:
                if self._should_shift(cue, start, end):
                    cue.start += seconds
                    if cue.end is not None:
                        cue.end += seconds

            self.SortCues()

    def ShiftTimeGradually(self, seconds : float, start : float = 0, end : float|None = None) -> None:
        """
        Shift cues by an amount that grows linearly from nothing at start to seconds at end,
        e.g. to correct subtitles that drift out of sync.
        """
        with self.lock:
            if end is None:
                end = self.MaxTime()

            if end <= start:
                return

            def shifted(time : float) -> float:
                return time + seconds * (time - start) / (end - start)

            for cue in self.cues:
                if self._should_shift(cue, start, end):
                    cue.start = shifted(cue.start)
                    if cue.end is not None:
                        cue.end = shifted(cue.end)

            self.SortCues()

    def MaxTime(self) -> float:
        """
        Latest end time of any cue
        """
        with self.lock:
            return max((cue.end for cue in self.cues if cue.end is not None), default=0.0)

    def SortCues(self) -> None:
        with self.lock:
            self.cues.sort(key=lambda cue: cue.start)

    def UpdateSettings(self, settings: SettingsType) -> None:
        """
        Update the settings passed to file handlers
        """
        with self.lock:
            self.settings.update(settings)

    def _set_data(self, data : SubtitleData) -> None:
        with self.lock:
            self.cues = data.lines
            self.metadata = data.metadata
            self.file_format = data.detected_format

        logging.info(f"Loaded {len(data.lines)} cues ({data.detected_format or 'unknown format'})")

    @staticmethod
    def _overlaps(cue : Cue, start : float, end : float) -> bool:
        if start < cue.start < end:
            return True
        return cue.end is not None and start < cue.end < end

    @staticmethod
    def _should_shift(cue : Cue, start : float, end : float|None) -> bool:
        cue_end = cue.end if cue.end is not None else cue.start
        if cue_end < start:
            return False
        if end is None:
            return True
        return cue.start <= end
