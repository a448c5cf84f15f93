import pysubs2
import pysubs2.time
import regex

from PySubconv.Cue import Cue
from PySubconv.SubtitleFileHandler import SubtitleFileHandler
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import SubtitleParseError

# Precompiled SSA to HTML conversion patterns
_SSA_TO_HTML_PATTERNS = [
    (regex.compile(r'{\\i1}'), '<i>'),
    (regex.compile(r'{\\i0}'), '</i>'),
]

# Precompiled HTML to SSA conversion patterns
_HTML_TO_SSA_PATTERNS = [
    (regex.compile(r'<i>'), r'{\\i1}'),
    (regex.compile(r'</i>'), r'{\\i0}'),
]

_OVERRIDE_TAG_PATTERN = regex.compile(r'\{[^}]*\}')
_SSA_SCRIPT_INFO_PATTERN = regex.compile(r'^\s*\[Script Info\]', regex.MULTILINE | regex.IGNORECASE)


class SSAFileHandler(SubtitleFileHandler):
    """
    File handler for Advanced SubStation Alpha (SSA/ASS) subtitle format using pysubs2 library.

    Italic tags are converted to and from <i>...</i>; other override tags are dropped.
    Event style and actor name are kept in cue metadata.
    """

    SUPPORTED_EXTENSIONS = {'.ass': 10, '.ssa': 10}

    def can_parse(self, content: str) -> bool:
        return bool(_SSA_SCRIPT_INFO_PATTERN.search(content))

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse string content and return SubtitleData with cues and metadata.
        """
        try:
            subs = pysubs2.SSAFile.from_string(content)

        except Exception as e:
            raise SubtitleParseError(f"Failed to parse content: {e}", e)

        file_format : str = getattr(subs, "format", None) or "ass"

        cues = [ self._pysubs2_to_cue(event) for event in subs if not event.is_comment ]
        metadata = { 'pysubs2_format': file_format }

        return SubtitleData(lines=cues, metadata=metadata, detected_format=pysubs2.formats.get_file_extension(file_format))

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into SSA/ASS format string.
        """
        subs : pysubs2.SSAFile = pysubs2.SSAFile()

        file_format = data.metadata.get('pysubs2_format', 'ass')

        for cue in data.lines:
            if cue.lines and cue.end is not None:
                subs.append(self._cue_to_pysubs2(cue))

        return subs.to_string(file_format)

    def _pysubs2_to_cue(self, event : pysubs2.SSAEvent) -> Cue:
        """Convert pysubs2 SSAEvent to a Cue."""
        text = event.text
        for pattern, replacement in _SSA_TO_HTML_PATTERNS:
            text = pattern.sub(replacement, text)
        text = _OVERRIDE_TAG_PATTERN.sub('', text)

        lines = regex.split(r'\\[Nn]', text)

        metadata = { 'style': event.style }
        if event.name:
            metadata['name'] = event.name

        return Cue(start=event.start / 1000, end=event.end / 1000, lines=lines, metadata=metadata)

    def _cue_to_pysubs2(self, cue : Cue) -> pysubs2.SSAEvent:
        """Convert a Cue to pysubs2 SSAEvent."""
        text = r'\N'.join(cue.lines)
        for pattern, replacement in _HTML_TO_SSA_PATTERNS:
            text = pattern.sub(replacement, text)

        event = pysubs2.SSAEvent(
            start=pysubs2.time.make_time(s=cue.start),
            end=pysubs2.time.make_time(s=cue.end or cue.start),
            text=text,
        )

        if cue.metadata.get('style'):
            event.style = cue.metadata['style']
        if cue.metadata.get('name'):
            event.name = cue.metadata['name']

        return event
