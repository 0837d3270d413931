"""Output settings deciding which parts of a hook run are logged."""

from __future__ import annotations

import enum
from typing import Any


class _Output(enum.IntFlag):
    META = enum.auto()
    SUCCESS = enum.auto()
    FAILURE = enum.auto()
    SUMMARY = enum.auto()
    SKIPS = enum.auto()
    EXECUTION = enum.auto()
    EXECUTION_OUTPUT = enum.auto()
    EXECUTION_INFO = enum.auto()
    EMPTY_SUMMARY = enum.auto()


_ALL = 0
for _flag in _Output:
    _ALL |= int(_flag)

_ENABLES = {
    "meta": _Output.META,
    "success": _Output.SUCCESS,
    "failure": _Output.FAILURE,
    "summary": _Output.SUMMARY | _Output.SUCCESS | _Output.FAILURE,
    "skips": _Output.SKIPS,
    "execution": _Output.EXECUTION
    | _Output.EXECUTION_OUTPUT
    | _Output.EXECUTION_INFO,
    "execution_out": _Output.EXECUTION_OUTPUT | _Output.EXECUTION,
    "execution_info": _Output.EXECUTION_INFO | _Output.EXECUTION,
    "empty_summary": _Output.EMPTY_SUMMARY,
}

_DISABLES = {
    "meta": _Output.META,
    "success": _Output.SUCCESS,
    "failure": _Output.FAILURE,
    "summary": _Output.SUMMARY | _Output.SUCCESS | _Output.FAILURE,
    "skips": _Output.SKIPS,
    "execution": _Output.EXECUTION
    | _Output.EXECUTION_OUTPUT
    | _Output.EXECUTION_INFO,
    "execution_out": _Output.EXECUTION_OUTPUT,
    "execution_info": _Output.EXECUTION_INFO,
    "empty_summary": _Output.EMPTY_SUMMARY,
}


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class LogSettings:
    """Which output sections are enabled; everything is enabled by default."""

    def __init__(self) -> None:
        self._bitmap = _ALL

    def apply(
        self,
        enable_tags: str,
        disable_tags: str,
        enable: Any,
        disable: Any,
    ) -> None:
        """Apply tags from the environment and settings from the config."""
        no_tags = enable_tags == "" and disable_tags == ""

        if no_tags and _is_empty(enable) and _is_empty(disable):
            self._bitmap = _ALL
            return

        if isinstance(enable, bool) and no_tags:
            self._bitmap = _ALL if enable else int(_Output.FAILURE)
            return

        if isinstance(disable, bool) and no_tags and disable:
            self._bitmap = int(_Output.FAILURE)
            return

        if isinstance(enable, (list, tuple)):
            if enable:
                self._bitmap = 0
            for option in enable:
                if isinstance(option, str):
                    self._enable(option)

        if isinstance(disable, (list, tuple)):
            for option in disable:
                if isinstance(option, str):
                    self._disable(option)

        if enable_tags:
            self._bitmap = 0
            for tag in enable_tags.split(","):
                self._enable(tag)

        if disable_tags:
            for tag in disable_tags.split(","):
                self._disable(tag)

    def _enable(self, setting: str) -> None:
        flags = _ENABLES.get(setting)
        if flags is not None:
            self._bitmap |= int(flags)

    def _disable(self, setting: str) -> None:
        flags = _DISABLES.get(setting)
        if flags is not None:
            self._bitmap &= ~int(flags)

    def _is_enabled(self, option: _Output) -> bool:
        return bool(self._bitmap & int(option))

    def log_success(self) -> bool:
        return self._is_enabled(_Output.SUCCESS)

    def log_failure(self) -> bool:
        return self._is_enabled(_Output.FAILURE)

    def log_summary(self) -> bool:
        return self._is_enabled(_Output.SUMMARY)

    def log_meta(self) -> bool:
        return self._is_enabled(_Output.META)

    def log_execution(self) -> bool:
        return self._is_enabled(_Output.EXECUTION)

    def log_execution_output(self) -> bool:
        return self._is_enabled(_Output.EXECUTION_OUTPUT)

    def log_execution_info(self) -> bool:
        return self._is_enabled(_Output.EXECUTION_INFO)

    def log_skips(self) -> bool:
        return self._is_enabled(_Output.SKIPS)

    def log_empty_summary(self) -> bool:
        return self._is_enabled(_Output.EMPTY_SUMMARY)