import logging
import srt # type: ignore
from collections.abc import Iterator
from datetime import timedelta

import regex

from PySubconv.Cue import Cue
from PySubconv.SubtitleFileHandler import SubtitleFileHandler
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import SubtitleParseError

_SRT_TIMING_PATTERN = regex.compile(r'^\s*\d+\s*\r?\n\s*\d+:\d{2}:\d{2}[,.]\d{1,3}\s*-->\s*\d+:\d{2}:\d{2}[,.]\d{1,3}', regex.MULTILINE)

class SrtFileHandler(SubtitleFileHandler):
    """
    File handler for SRT subtitle format.
    Encapsulates all SRT library usage for file I/O operations.
    SRT is a simple format with minimal metadata.
    """

    SUPPORTED_EXTENSIONS = {'.srt': 10}

    def can_parse(self, content: str) -> bool:
        return bool(_SRT_TIMING_PATTERN.search(content))

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse SRT string content and return SubtitleData with cues and metadata.
        """
        cues = list(self._parse_srt_items(content))
        return SubtitleData(lines=cues, metadata={}, detected_format='.srt')

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into SRT format string, renumbering them from 1.
        """
        srt_items = []
        for cue in data.lines:
            if cue.lines and cue.end is not None:
                srt_items.append(srt.Subtitle(
                    index=len(srt_items) + 1,
                    start=timedelta(seconds=cue.start),
                    end=timedelta(seconds=cue.end),
                    content=cue.text,
                    proprietary=cue.metadata.get('proprietary', '')
                ))

        num_skipped = len(data.lines) - len(srt_items)
        if num_skipped:
            logging.warning(f"{num_skipped} cues were empty or had no end time and were not written to the output file")

        return srt.compose(srt_items, reindex=False)

    def _parse_srt_items(self, source) -> Iterator[Cue]:
        """
        Internal helper to parse SRT items and yield Cue objects.
        """
        try:
            for srt_item in srt.parse(source):
                metadata = {}
                proprietary = getattr(srt_item, 'proprietary', '')
                if proprietary:
                    metadata['proprietary'] = proprietary

                yield Cue.Construct(
                    start=srt_item.start.total_seconds(),
                    end=srt_item.end.total_seconds(),
                    text=srt_item.content,
                    metadata=metadata
                )

        except srt.SRTParseError as e:
            raise SubtitleParseError(f"Failed to parse SRT: {e}", e)
        except Exception as e:
            raise SubtitleParseError(f"Unexpected error parsing SRT: {e}", e)
