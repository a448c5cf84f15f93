import logging
import os
from dataclasses import dataclass, field

import regex

from PySubconv.Cue import Cue
from PySubconv.Formats.SccCodes import (
    BOTTOM_ROW_CODES,
    BREAK,
    CHARACTER_CODES,
    CHARACTERS,
    COMMANDS,
    END_OF_CAPTION,
    ERASE_DISPLAYED_MEMORY,
    ERASE_NON_DISPLAYED_MEMORY,
    EXTENDED_CHARACTER_CODES,
    EXTENDED_CHARACTERS,
    HEADER,
    ITALIC_OFF,
    ITALIC_ON,
    MIDROW_ITALICS,
    MIDROW_WHITE,
    NO_SYMBOL,
    PADDING,
    RESUME_CAPTION_LOADING,
    SPECIAL_CHARACTER_CODES,
    SPECIAL_CHARACTERS,
)
from PySubconv.Helpers.Text import WrapLines
from PySubconv.Helpers.Timecode import DEFAULT_FRAME_RATE, FormatTimecode, FramesBetween, ParseTimecode
from PySubconv.SettingsType import SettingsType
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleFileHandler import SubtitleFileHandler

# A timecode followed by a run of 4 hex digit codes, e.g. "00:01:14:20	9420 9420 94ae".
# Lines without a colon separated timecode are not records
_RECORD_PATTERN = regex.compile(r'^(\d+(?::\d+)+(?:[;.]\d+)?)[ \t]+([0-9a-fA-F]{4}(?:[ \t]+[0-9a-fA-F]{4})*)[ \t]*\r?$', regex.MULTILINE)
_ITALIC_TAG_PATTERN = regex.compile(r'(</?i>)')
_EMPTY_ITALICS_PATTERN = regex.compile(r'<i>(\s*)</i>')

_NEWLINE = '\r\n'
_DEFAULT_LINE_LENGTH = int(os.getenv('SCC_MAX_LINE_LENGTH', '32'))
_DEFAULT_DURATION = 1.0
_MAX_ROWS = len(BOTTOM_ROW_CODES)


@dataclass
class _CueAccumulator:
    """
    Folds decoded records into cues, tracking the cue that is still waiting for an end time.
    """
    cues : list[Cue] = field(default_factory=list)
    open_cue : Cue|None = None

    def AddContent(self, time : float, lines : list[str]) -> None:
        self.Close(time)
        self.open_cue = Cue(start=time, lines=lines)
        self.cues.append(self.open_cue)

    def Close(self, time : float) -> None:
        if self.open_cue is not None:
            self.open_cue.end = time
            self.open_cue = None

    def Finish(self) -> list[Cue]:
        if self.open_cue is not None:
            self.Close(self.open_cue.start + _DEFAULT_DURATION)
        return self.cues


class SccFileHandler(SubtitleFileHandler):
    """
    File handler for Scenarist Closed Caption (SCC) files.

    Decodes EIA-608 pop-on caption records into cues, inferring end times from the next
    caption or erase command, and encodes cues as pop-on captions aligned to the bottom rows.

    Settings:
        frame_rate (float): Frames per second used for timecodes (default 29.97 or SCC_FRAME_RATE)
        max_line_length (int): Characters per caption row (default 32 or SCC_MAX_LINE_LENGTH)
        italic_tags (bool): Represent italics as <i>...</i> in cue text (default False)
    """

    SUPPORTED_EXTENSIONS = {'.scc': 10}

    def __init__(self, settings : SettingsType|dict|None = None):
        super().__init__(settings)
        settings = self.settings
        frame_rate = settings.get_float('frame_rate')
        self.frame_rate : float = DEFAULT_FRAME_RATE if frame_rate is None else frame_rate
        self.max_line_length : int = settings.get_int('max_line_length', _DEFAULT_LINE_LENGTH) or _DEFAULT_LINE_LENGTH
        self.italic_tags : bool = settings.get_bool('italic_tags', False)

        if self.frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {self.frame_rate}")

    def can_parse(self, content: str) -> bool:
        return HEADER in content

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse SCC content into cues.

        Raises:
            FormatError: If a record has a malformed timecode
        """
        accumulator = _CueAccumulator()
        record_count = 0
        unknown_codes = 0

        for match in _RECORD_PATTERN.finditer(content):
            time = ParseTimecode(match.group(1), self.frame_rate)
            lines, unknown = self._decode_payload(match.group(2))
            record_count += 1
            unknown_codes += unknown

            if lines:
                accumulator.AddContent(time, lines)
            else:
                accumulator.Close(time)

        cues = accumulator.Finish()

        if unknown_codes:
            logging.warning(f"{unknown_codes} unrecognised caption codes were replaced with '{NO_SYMBOL}'")

        logging.debug(f"Decoded {len(cues)} cues from {record_count} SCC records")

        return SubtitleData(lines=cues, metadata={}, detected_format='.scc')

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into SCC format, adding an erase record wherever a cue is not
        immediately followed by the next one.
        """
        output = [ HEADER, _NEWLINE, _NEWLINE ]

        cues = data.lines
        for index, cue in enumerate(cues):
            if cue.end is None:
                raise ValueError(f"Cue at {cue.start:.3f}s has no end time")

            next_cue = cues[index + 1] if index + 1 < len(cues) else None

            output.append(self._compose_caption(cue))

            if next_cue is None or FramesBetween(cue.end, next_cue.start, self.frame_rate) > 1:
                output.append(self._compose_record(cue.end, [ERASE_DISPLAYED_MEMORY, ERASE_DISPLAYED_MEMORY]))

        return ''.join(output)

    def _decode_payload(self, payload : str) -> tuple[list[str], int]:
        """
        Decode a record's codes into display lines, discarding blank lines.
        Returns the lines and the number of bytes that were not recognised.
        """
        text : list[str] = []
        italic = False
        unknown = 0

        for code in payload.lower().split():
            commands = COMMANDS.get(code)
            if commands is not None:
                italic = self._apply_commands(commands, italic, text)

            elif code in EXTENDED_CHARACTERS:
                text.append(EXTENDED_CHARACTERS[code])

            elif code in SPECIAL_CHARACTERS:
                text.append(SPECIAL_CHARACTERS[code])

            else:
                for byte in (code[:2], code[2:]):
                    character = CHARACTERS.get(byte)
                    if character is None:
                        unknown += 1
                        character = NO_SYMBOL
                    text.append(character)

        if italic and self.italic_tags:
            text.append('</i>')

        lines = ''.join(text).split('\n')
        if self.italic_tags:
            lines = [ _EMPTY_ITALICS_PATTERN.sub(r'\1', line) for line in lines ]

        return [ line for line in lines if line.strip() ], unknown

    def _apply_commands(self, commands : tuple[str, ...], italic : bool, text : list[str]) -> bool:
        """
        Apply line break and italics commands, returning the new italics state.
        A row change resets italics unless the preamble code selects them.
        """
        if not commands:
            return italic

        italic_after = italic
        if BREAK in commands:
            italic_after = ITALIC_ON in commands
        elif ITALIC_ON in commands:
            italic_after = True
        elif ITALIC_OFF in commands:
            italic_after = False

        if self.italic_tags and italic and (BREAK in commands or not italic_after):
            text.append('</i>')

        if BREAK in commands:
            text.append('\n')

        if self.italic_tags and italic_after and (BREAK in commands or not italic):
            text.append('<i>')

        return italic_after

    def _compose_caption(self, cue : Cue) -> str:
        """
        Build the pop-on record for a cue, placing its rows at the bottom of the screen.
        """
        lines = WrapLines(cue.lines, self.max_line_length)

        if not any(line.strip() for line in lines):
            logging.warning(f"Cue at {cue.start:.3f}s has no text")

        if len(lines) > _MAX_ROWS:
            logging.warning(f"Cue at {cue.start:.3f}s has {len(lines)} rows, only {_MAX_ROWS} can be displayed")
            lines = lines[-_MAX_ROWS:]

        codes = [ ERASE_NON_DISPLAYED_MEMORY, ERASE_NON_DISPLAYED_MEMORY, RESUME_CAPTION_LOADING, RESUME_CAPTION_LOADING ]

        first_row = _MAX_ROWS - len(lines)
        for row, line in enumerate(lines, first_row):
            codes.extend([ BOTTOM_ROW_CODES[row], BOTTOM_ROW_CODES[row] ])
            codes.extend(self._encode_line(line))

        codes.extend([ END_OF_CAPTION, END_OF_CAPTION ])

        return self._compose_record(cue.start, codes)

    def _compose_record(self, time : float, codes : list[str]) -> str:
        return f"{FormatTimecode(time, self.frame_rate)}\t{' '.join(codes)}{_NEWLINE}{_NEWLINE}"

    def _encode_line(self, line : str) -> list[str]:
        """
        Encode a row of text as 4 hex digit codes.

        Characters take one byte each; special and extended characters take a whole code,
        so a padding byte is inserted first if they would straddle two codes.
        """
        digits = ''

        parts = _ITALIC_TAG_PATTERN.split(line) if self.italic_tags else [line]
        for part in parts:
            if self.italic_tags and part in ('<i>', '</i>'):
                digits = self._append_code(digits, MIDROW_ITALICS if part == '<i>' else MIDROW_WHITE)
                continue

            for character in part:
                if character in CHARACTER_CODES:
                    digits += CHARACTER_CODES[character]
                elif character in SPECIAL_CHARACTER_CODES:
                    digits = self._append_code(digits, SPECIAL_CHARACTER_CODES[character])
                elif character in EXTENDED_CHARACTER_CODES:
                    digits = self._append_code(digits, EXTENDED_CHARACTER_CODES[character])
                else:
                    logging.debug(f"Character {character!r} cannot be encoded in SCC, using '{NO_SYMBOL}'")
                    digits += CHARACTER_CODES[NO_SYMBOL]

        if len(digits) % 4:
            digits += PADDING

        return [ digits[i:i + 4] for i in range(0, len(digits), 4) ]

    def _append_code(self, digits : str, code : str) -> str:
        if len(digits) % 4:
            digits += PADDING
        return digits + code
