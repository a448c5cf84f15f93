import importlib
import inspect
import logging
import os
import pkgutil
from pathlib import Path

import pysubs2

from PySubconv.SubtitleFileHandler import (
    SubtitleFileHandler,
    default_encoding,
    fallback_encoding,
)
from PySubconv.SettingsType import SettingsType
from PySubconv.SubtitleData import SubtitleData
from PySubconv.SubtitleError import SubtitleParseError


class SubtitleFormatRegistry:
    """
    Maps file extensions to subtitle file handlers.

    Handlers are found the first time they are needed by scanning the Formats package for
    concrete subclasses of SubtitleFileHandler. When two handlers claim an extension the one
    with the higher priority wins.
    """
    _handlers : dict[str, type[SubtitleFileHandler]] = {}
    _priorities : dict[str, int] = {}
    _discovered : bool = False

    @classmethod
    def register_handler(cls, handler_class : type[SubtitleFileHandler]) -> None:
        """
        Register a handler class for each extension it supports, unless a higher priority handler is registered.
        """
        for ext, priority in handler_class().get_extension_priorities().items():
            ext = ext.lower()
            if priority >= cls._priorities.get(ext, priority):
                cls._handlers[ext] = handler_class
                cls._priorities[ext] = priority

    @classmethod
    def get_handler_by_extension(cls, extension : str) -> type[SubtitleFileHandler]:
        """
        Look up the handler class for an extension, with or without the leading dot.
        """
        cls._ensure_discovered()
        ext = extension.lower() if extension.startswith('.') else f".{extension.lower()}"
        handler_class = cls._handlers.get(ext)
        if handler_class is None:
            raise ValueError(f"Unknown subtitle format: {extension}. Available formats: {cls.list_available_formats()}")
        return handler_class

    @classmethod
    def create_handler(cls, extension: str|None = None, filename: str|None = None, settings: SettingsType|None = None) -> SubtitleFileHandler:
        """
        Create a handler for an extension, or for the extension of a filename, configured with settings.
        """
        extension = extension or (cls.get_format_from_filename(filename) if filename else None)
        if not extension:
            raise ValueError(f"Cannot determine the subtitle format of '{filename}'. Available formats: {cls.list_available_formats()}")

        handler_class = cls.get_handler_by_extension(extension)
        return handler_class(settings)

    @classmethod
    def enumerate_formats(cls) -> list[str]:
        """ Sorted list of supported file extensions """
        cls._ensure_discovered()
        return sorted(cls._handlers)

    @classmethod
    def list_available_formats(cls) -> str:
        formats = cls.enumerate_formats()
        return ", ".join(formats) if formats else "None"

    @classmethod
    def disable_autodiscovery(cls) -> None:
        """ Start with an empty registry that only contains explicitly registered handlers """
        cls.clear()
        cls._discovered = True

    @classmethod
    def enable_autodiscovery(cls) -> None:
        cls._discovered = False

    @classmethod
    def discover(cls) -> None:
        """
        Import every module in the Formats package and register the handlers it defines.
        """
        formats_path = Path(__file__).parent / "Formats"
        for module_info in pkgutil.iter_modules([str(formats_path)]):
            module = importlib.import_module(f"PySubconv.Formats.{module_info.name}")
            for _, member in inspect.getmembers(module, inspect.isclass):
                if issubclass(member, SubtitleFileHandler) and not inspect.isabstract(member):
                    cls.register_handler(member)

        cls._discovered = True
        logging.debug(f"Registered subtitle formats: {cls.list_available_formats()}")

    @classmethod
    def clear(cls) -> None:
        cls._handlers.clear()
        cls._priorities.clear()
        cls._discovered = False

    @classmethod
    def get_format_from_filename(cls, filename : str) -> str|None:
        """
        Lower-case extension of a filename, e.g. '.scc', or None if it has none
        """
        extension = os.path.splitext(filename)[1]
        return extension.lower() or None

    @classmethod
    def detect_format_from_content(cls, content : str) -> str:
        """
        Work out which format a string is in, returning its file extension.

        Each registered handler is asked whether it recognises the content, highest priority first.
        If none does, pysubs2 format autodetection is tried.

        Raises:
            SubtitleParseError: If the format cannot be identified or is not supported
        """
        cls._ensure_discovered()

        candidates = sorted(cls._handlers.items(), key=lambda item: cls._priorities[item[0]], reverse=True)
        asked : set[type[SubtitleFileHandler]] = set()
        for ext, handler_class in candidates:
            if handler_class in asked:
                continue
            asked.add(handler_class)

            if handler_class().can_parse(content):
                logging.info(f"Detected subtitle format '{ext}'")
                return ext

        try:
            pysubs2_format = pysubs2.formats.autodetect_format(content)
        except Exception as e:
            raise SubtitleParseError(f"Failed to detect subtitle format: {e}", e)

        extension = pysubs2.formats.get_file_extension(pysubs2_format)
        if extension not in cls._handlers:
            raise SubtitleParseError(f"Detected subtitle format '{extension}' is not supported.")

        logging.info(f"Detected subtitle format '{extension}'")
        return extension

    @classmethod
    def detect_format_and_load_file(cls, path: str, settings: SettingsType|None = None) -> SubtitleData:
        """
        Read a file and parse it with the handler for the format detected from its content.
        """
        try:
            with open(path, 'r', encoding=default_encoding) as f:
                content = f.read()
        except UnicodeDecodeError:
            with open(path, 'r', encoding=fallback_encoding) as f:
                content = f.read()

        extension = cls.detect_format_from_content(content)
        data = cls.create_handler(extension, settings=settings).parse_string(content)
        data.detected_format = data.detected_format or extension
        return data

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()
