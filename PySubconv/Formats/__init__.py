"""
PySubconv.Formats - Format-specific file handlers

Each handler converts between one file format and the internal cue list.
"""

# Handler modules are imported here as well as discovered, so installed packages register them too
from . import SccFileHandler
from . import SrtFileHandler
from . import SSAFileHandler
from . import VttFileHandler
