from abc import ABC, abstractmethod
from typing import TextIO
import os

from PySubconv.SettingsType import SettingsType
from PySubconv.SubtitleData import SubtitleData

# Default encodings for reading subtitle files
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING', 'iso-8859-1')


class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle files.

    Implementations convert between a file format and the internal cue list.
    """

    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    def __init__(self, settings : SettingsType|dict|None = None):
        self.settings : SettingsType = SettingsType(settings)

    def load_file(self, path: str) -> SubtitleData:
        """
        Open a subtitle file and parse it, retrying with the fallback encoding if necessary.

        Raises:
            SubtitleParseError: If parsing fails
            UnicodeDecodeError: If file is in an unsupported encoding
        """
        try:
            with open(path, 'r', encoding=default_encoding) as f:
                return self.parse_file(f)
        except UnicodeDecodeError:
            with open(path, 'r', encoding=fallback_encoding) as f:
                return self.parse_file(f)

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """
        Parse subtitle file content and return cues with file-level metadata.
        """
        return self.parse_string(file_obj.read())

    @abstractmethod
    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse subtitle string content and return cues with file-level metadata.

        Returns:
            SubtitleData: Parsed cues and metadata

        Raises:
            SubtitleParseError: If parsing fails
        """
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into text for saving or exporting.

        Args:
            data: SubtitleData containing cues and metadata

        Returns:
            str: Subtitle content in the file handler's format
        """
        raise NotImplementedError

    def can_parse(self, content: str) -> bool:
        """
        Check whether content looks like this handler's format.
        Handlers that cannot tell from content alone return False.
        """
        return False

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.

        Returns:
            dict: Mapping of file extensions to their priority (higher = more preferred)
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()
