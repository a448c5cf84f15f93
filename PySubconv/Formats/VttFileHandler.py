import regex

from PySubconv.Cue import Cue
from PySubconv.SubtitleFileHandler import SubtitleFileHandler
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import SubtitleParseError


class VttFileHandler(SubtitleFileHandler):
    """
    WebVTT subtitle format handler.

    Cue identifiers and cue settings are kept in cue metadata, and NOTE and STYLE
    blocks in file metadata, so that they survive a round trip.
    """

    SUPPORTED_EXTENSIONS = {'.vtt': 10}

    # Regex patterns for VTT parsing
    _TIMESTAMP_PATTERN = regex.compile(
        r'(?:(\d{2,}):)?(\d{2}):(\d{2})\.(\d{3})\s*-->\s*(?:(\d{2,}):)?(\d{2}):(\d{2})\.(\d{3})(.*)'
    )
    _STYLE_BLOCK_START = regex.compile(r'^\s*STYLE\s*$')
    _NOTE_BLOCK_START = regex.compile(r'^\s*NOTE(?:\s.*)?$')

    def can_parse(self, content: str) -> bool:
        return content.lstrip('\ufeff').lstrip().startswith('WEBVTT')

    def parse_string(self, content: str) -> SubtitleData:
        """Parse string content and return SubtitleData with cues and metadata."""
        try:
            lines = content.splitlines()

            if not lines or not lines[0].strip().lstrip('\ufeff').startswith('WEBVTT'):
                raise SubtitleParseError("Invalid WebVTT file: missing WEBVTT header")

            metadata = { 'header_text': lines[0].strip().lstrip('\ufeff'), 'vtt_styles': [], 'vtt_notes': [] }
            cues = self._parse_blocks(lines, metadata)

            return SubtitleData(lines=cues, metadata=metadata, detected_format='.vtt')

        except Exception as e:
            if isinstance(e, SubtitleParseError):
                raise
            raise SubtitleParseError(f"Failed to parse content: {e}", e)

    def compose(self, data: SubtitleData) -> str:
        """Compose cues into WebVTT format string."""
        output_lines = [ data.metadata.get('header_text', 'WEBVTT'), '' ]

        for note_block in data.metadata.get('vtt_notes', []):
            output_lines.extend([ note_block, '' ])

        for style_block in data.metadata.get('vtt_styles', []):
            output_lines.extend([ 'STYLE', style_block, '' ])

        for cue in data.lines:
            if not cue.lines or cue.end is None:
                continue

            if 'cue_id' in cue.metadata:
                output_lines.append(cue.metadata['cue_id'])

            timestamp_line = f"{self._format_timestamp(cue.start)} --> {self._format_timestamp(cue.end)}"
            if 'vtt_settings' in cue.metadata:
                timestamp_line += f" {cue.metadata['vtt_settings']}"

            output_lines.append(timestamp_line)
            output_lines.extend(cue.lines)
            output_lines.append('')

        return '\n'.join(output_lines)

    def _parse_blocks(self, lines : list[str], metadata : dict) -> list[Cue]:
        """Parse blank-line separated blocks following the header."""
        cues = []
        i = 1

        # Header continuation lines belong to the header block
        while i < len(lines) and lines[i].strip():
            i += 1

        while i < len(lines):
            if not lines[i].strip():
                i += 1
                continue

            block = []
            while i < len(lines) and lines[i].strip():
                block.append(lines[i])
                i += 1

            if self._STYLE_BLOCK_START.match(block[0]):
                metadata['vtt_styles'].append('\n'.join(block[1:]))
            elif self._NOTE_BLOCK_START.match(block[0]):
                metadata['vtt_notes'].append('\n'.join(block))
            else:
                cue = self._parse_cue(block)
                if cue:
                    cues.append(cue)

        return cues

    def _parse_cue(self, block : list[str]) -> Cue|None:
        """Parse a cue block, with an optional identifier line before the timing line."""
        cue_metadata = {}
        if not self._TIMESTAMP_PATTERN.match(block[0].strip()):
            if len(block) < 2:
                return None
            cue_metadata['cue_id'] = block[0].strip()
            block = block[1:]

        timestamp_match = self._TIMESTAMP_PATTERN.match(block[0].strip())
        if not timestamp_match:
            return None

        start = self._parse_timestamp(timestamp_match.groups()[:4])
        end = self._parse_timestamp(timestamp_match.groups()[4:8])
        cue_settings = (timestamp_match.group(9) or "").strip()
        if cue_settings:
            cue_metadata['vtt_settings'] = cue_settings

        return Cue(start=start, end=end, lines=block[1:], metadata=cue_metadata)

    def _parse_timestamp(self, time_parts) -> float:
        """Parse timestamp components into seconds."""
        hours, minutes, seconds, milliseconds = [int(p or 0) for p in time_parts]
        return hours * 3600 + minutes * 60 + seconds + milliseconds / 1000

    def _format_timestamp(self, seconds : float) -> str:
        """Format seconds as WebVTT timestamp."""
        total_milliseconds = int(round(seconds * 1000))
        hours, remainder = divmod(total_milliseconds, 3600000)
        minutes, remainder = divmod(remainder, 60000)
        secs, milliseconds = divmod(remainder, 1000)

        return f"{hours:02d}:{minutes:02d}:{secs:02d}.{milliseconds:03d}"
