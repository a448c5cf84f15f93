from __future__ import annotations
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType']

_TRUE_STRINGS = ('true', '1', 'yes')
_FALSE_STRINGS = ('false', '0', 'no')

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Handler settings with type-safe getters.

    Values may arrive as strings (e.g. from environment variables or the command line),
    so numeric and boolean getters accept their string forms as well.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        """Get a boolean setting, treating a missing value as False"""
        value = self.get(key, default)
        if value is None:
            return False

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            if value.lower() in _TRUE_STRINGS:
                return True
            if value.lower() in _FALSE_STRINGS:
                return False

        raise self._conversion_error(key, value, 'bool')

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting (floats are truncated)"""
        return self._get_number(key, default, int)

    def get_float(self, key: str, default: float|None = None) -> float|None:
        """Get a float setting"""
        return self._get_number(key, default, float)

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a setting as a string, joining lists with commas"""
        value = self.get(key, default)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, list):
            return ', '.join(str(v) for v in value)
        return str(value)

    def update(self, other=(), /, **kwds) -> None:
        """Update settings, ignoring None values so that unset options keep their current value"""
        if isinstance(other, Mapping):
            other = { k: v for k, v in other.items() if v is not None }
        super().update(other, **{ k: v for k, v in kwds.items() if v is not None })

    def _get_number(self, key : str, default : Any, convert : Callable[[Any], Any]) -> Any:
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool):
            raise self._conversion_error(key, value, convert.__name__)

        if isinstance(value, (int, float)):
            return convert(value)

        if isinstance(value, str):
            try:
                return convert(value)
            except ValueError:
                pass

        raise self._conversion_error(key, value, convert.__name__)

    @staticmethod
    def _conversion_error(key : str, value : Any, type_name : str) -> SettingsError:
        return SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to {type_name}")
