import os

def GetInputPath(filepath : str|None) -> str|None:
    """ Normalise a source path, or return None if there isn't one """
    return os.path.normpath(filepath) if filepath else None

def GetOutputPath(filepath : str|None, format_extension : str|None = None) -> str|None:
    """
    Derive the path to write a converted subtitle file to.

    The input extension is replaced by format_extension (with or without a leading dot).
    If that would overwrite the input file, '.converted' is inserted before the extension,
    e.g. movie.scc -> movie.converted.scc.
    """
    if not filepath:
        return None

    root, current_extension = os.path.splitext(filepath)

    extension = format_extension or current_extension or '.srt'
    if not extension.startswith('.'):
        extension = f".{extension}"

    if extension.lower() == current_extension.lower():
        root = f"{root}.converted"

    return os.path.normpath(f"{root}{extension}")
