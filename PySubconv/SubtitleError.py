class SubtitleError(Exception):
    """ Base class for errors raised while loading, converting or saving subtitles """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error and not self.message:
            return str(self.error)
        return self.message or super().__str__()

class SubtitleParseError(SubtitleError):
    """ Raised when subtitle content cannot be parsed """
    pass

class FormatError(SubtitleParseError):
    """ Raised when a timecode field in a caption stream is malformed """
    pass
