import os
import sys
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from check_imports import check_required_imports
check_required_imports(['PySubconv', 'regex', 'srt', 'pysubs2'])

from PySubconv import load_subtitles
from PySubconv.Helpers import GetOutputPath
from PySubconv.SettingsType import SettingsType
from PySubconv.SubtitleError import SubtitleError
from PySubconv.SubtitleFormatRegistry import SubtitleFormatRegistry

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(logfilename: str, debug: bool = False, log_dir: str|None = None) -> LoggerOptions:
    """ Initialise the console logger, and a log file if a directory is given """
    file_handler = None
    log_path = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    if log_dir:
        log_path = os.path.join(log_dir, f"{logfilename}.log")
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
            file_handler.setLevel(logging_level)
            file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            logging.getLogger('').addHandler(file_handler)
        except OSError as e:
            logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.list_available_formats()
        print(f"Supported subtitle formats: {formats}")
        raise SystemExit(0)

def CreateArgParser() -> ArgumentParser:
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    HandleFormatListing(pre_args)

    parser = ArgumentParser(description="Converts subtitles between formats, including Scenarist SCC closed captions")
    parser.add_argument('input', help="Path to subtitle file (see --list-formats for supported formats)")
    parser.add_argument('-o', '--output', help="Output subtitle file path; format inferred from extension")
    parser.add_argument('-f', '--format', type=str, default=None, help="Output format extension, e.g. .scc, if it differs from the output file extension")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('--framerate', type=float, default=None, help="Frame rate for SCC timecodes (default 29.97)")
    parser.add_argument('--linelength', type=int, default=None, help="Maximum characters per SCC caption row (default 32)")
    parser.add_argument('--italics', action='store_true', help="Convert SCC italics to and from <i> tags")
    parser.add_argument('--shift', type=float, default=None, help="Number of seconds to shift all cues by")
    parser.add_argument('--logdir', type=str, default=None, help="Directory to write a log file to")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateSettings(args: Namespace) -> SettingsType:
    return SettingsType({
        'frame_rate': args.framerate,
        'max_line_length': args.linelength,
        'italic_tags': args.italics,
    })

if __name__ == "__main__":
    parser = CreateArgParser()
    args = parser.parse_args()

    logger_options = InitLogger("subconv", args.debug, args.logdir)

    try:
        subtitles = load_subtitles(filepath=args.input, settings=CreateSettings(args))
        if not subtitles.has_subtitles:
            raise SubtitleError(f"No subtitles were loaded from {args.input}")

        if args.shift:
            subtitles.ShiftTime(args.shift)

        output_path = args.output or GetOutputPath(args.input, args.format or '.srt')
        subtitles.SaveSubtitles(output_path, args.format)

        logging.info(f"Converted {subtitles.linecount} cues from {args.input} to {output_path}")

    except Exception as e:
        print("Error:", e)
        raise
