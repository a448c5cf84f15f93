"""
PySubconv - Subtitle Format Conversion Library

Reads subtitle and caption files into a shared list of timed cues and writes them out
in any supported format, including Scenarist Closed Caption (SCC) streams.

Basic Usage
-----------

# Convert a file, inferring both formats from the file extensions
convert_file("movie.scc", "movie.srt")

# Load subtitles, shift them and save them in another format
subs = load_subtitles(filepath="movie.srt")
subs.ShiftTime(1.5)
subs.SaveSubtitles("movie.scc")

# Work with the SCC codec directly
cues = decode_scc(scc_text)
scc_text = encode_scc(cues)
"""
from __future__ import annotations

from PySubconv.Cue import Cue
from PySubconv.Formats.SccFileHandler import SccFileHandler
from PySubconv.SettingsType import SettingType, SettingsType
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import FormatError, SubtitleError, SubtitleParseError
from PySubconv.SubtitleFileHandler import SubtitleFileHandler
from PySubconv.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubconv.Subtitles import Subtitles
from PySubconv.version import __version__


def load_subtitles(
    filepath: str|None = None,
    content: str|None = None,
    *,
    settings: SettingsType|dict[str, SettingType]|None = None,
) -> Subtitles:
    """
    Initialise a :class:`Subtitles` instance from a file or a string.

    Parameters
    ----------
    filepath : str|None
        Path to the subtitle file to load. The format is chosen by file extension.

    content : str|None
        Subtitle content as a string. The format is detected from the content.

    settings : SettingsType, optional
        Settings passed to the file handlers, e.g. `frame_rate` or `italic_tags` for SCC.

    Returns
    -------
    Subtitles : A subtitles instance containing the loaded cues.

    Examples
    --------

    subs = load_subtitles(filepath="movie.scc", settings={'italic_tags': True})
    """
    if filepath and content:
        raise SubtitleError("Only one of 'filepath' or 'content' should be provided, not both.")

    subtitles = Subtitles(settings=SettingsType(settings))

    if filepath:
        subtitles.LoadSubtitles(filepath)
    elif content:
        subtitles.LoadSubtitlesFromString(content)

    return subtitles

def convert_file(
    source: str,
    destination: str,
    format: str|None = None,
    *,
    settings: SettingsType|dict[str, SettingType]|None = None,
) -> Subtitles:
    """
    Load a subtitle file and save it to another path, optionally in an explicit format.
    """
    subtitles = load_subtitles(filepath=source, settings=settings)
    if not subtitles.has_subtitles:
        raise SubtitleError(f"No subtitles were loaded from '{source}'")

    subtitles.SaveSubtitles(destination, format)
    return subtitles

def decode_scc(content: str, frame_rate: float|None = None) -> list[Cue]:
    """
    Decode the text of an SCC file into cues.

    Raises
    ------
    FormatError
        If a record has a malformed timecode.
    """
    handler = SccFileHandler(SettingsType({'frame_rate': frame_rate}))
    return handler.parse_string(content).lines

def encode_scc(cues: list[Cue], frame_rate: float|None = None) -> str:
    """
    Encode cues as the text of an SCC file.
    """
    handler = SccFileHandler(SettingsType({'frame_rate': frame_rate}))
    return handler.compose(SubtitleData(lines=list(cues)))

__all__ = [
    '__version__',
    'Cue',
    'FormatError',
    'SccFileHandler',
    'SettingsType',
    'SubtitleData',
    'SubtitleError',
    'SubtitleFileHandler',
    'SubtitleFormatRegistry',
    'SubtitleParseError',
    'Subtitles',
    'convert_file',
    'decode_scc',
    'encode_scc',
    'load_subtitles',
]
