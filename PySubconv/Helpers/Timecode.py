import math
import os

import regex

from PySubconv.SubtitleError import FormatError

DEFAULT_FRAME_RATE = float(os.getenv('SCC_FRAME_RATE', '29.97'))

_TIMECODE_PATTERN = regex.compile(r'^(\d+):(\d+):(\d+)[:;](\d+)$')
_FRAME_PRECISION = 6

def ParseTimecode(timecode : str, frame_rate : float = DEFAULT_FRAME_RATE) -> float:
    """
    Convert a broadcast timecode (HH:MM:SS:FF) to seconds from the start of the stream.

    A semicolon before the frame field is accepted and treated as a colon.

    Raises:
        FormatError: If the timecode does not have four numeric fields
    """
    match = _TIMECODE_PATTERN.match(timecode.strip())
    if not match:
        raise FormatError(f"Invalid timecode: {timecode}")

    hours, minutes, seconds, frames = (int(field) for field in match.groups())
    return hours * 3600 + minutes * 60 + seconds + frames / frame_rate

def FormatTimecode(seconds : float, frame_rate : float = DEFAULT_FRAME_RATE) -> str:
    """
    Convert seconds from the start of the stream to a broadcast timecode (HH:MM:SS:FF).

    Hours wrap at 24. The frame number is rounded and clamped to the last frame of the second,
    so a fraction that rounds up to a whole second stays on the last frame rather than carrying.
    """
    whole, fraction = divmod(seconds, 1)
    whole = int(whole)

    frame = math.floor(fraction * frame_rate + 0.5)
    frame = min(frame, LastFrame(frame_rate))

    hours = (whole // 3600) % 24
    minutes = (whole % 3600) // 60
    secs = whole % 60

    return f"{hours:02d}:{minutes:02d}:{secs:02d}:{frame:02d}"

def LastFrame(frame_rate : float) -> int:
    """ Highest frame number that can appear in a timecode at this frame rate """
    return math.ceil(frame_rate) - 1

def FramesBetween(start : float, end : float, frame_rate : float = DEFAULT_FRAME_RATE) -> float:
    """
    Distance between two times measured in frames.

    Rounded so that times parsed from adjacent timecodes are exactly one frame apart
    at non-integer frame rates.
    """
    return round((end - start) * frame_rate, _FRAME_PRECISION)
