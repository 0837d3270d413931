"""Terminal logging with levels, colours, simple boxes and a spinner."""

from __future__ import annotations

import enum
import io
import os
import re
import sys
import threading
import unicodedata
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, TextIO

from lefthook.version import version


class Level(enum.IntEnum):
    """Logging levels; a higher value is more verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


class ColorMode(enum.IntEnum):
    """How colours are decided."""

    AUTO = 7
    ON = 8
    OFF = 9


_DEFAULT_PALETTE: dict[str, str | None] = {
    "red": "#ff6347",
    "green": "#32cd32",
    "yellow": "#fada5e",
    "cyan": "#70C0BA",
    "gray": "#808080",
    "border": "#383838",
}

_palette: dict[str, str | None] = dict(_DEFAULT_PALETTE)

_SEPARATOR_WIDTH = 36
_SEPARATOR_MARGIN = 2
_PADDING = 2

_SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
_SPINNER_INTERVAL = 0.1
_SPINNER_TEXT = " waiting"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


# ---------------------------------------------------------------- rendering


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or char == "\ufe0f" or char == "\u200d":
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def _width(text: str) -> int:
    return sum(_char_width(c) for c in _ANSI_RE.sub("", text))


def _fg_code(spec: str) -> str | None:
    if spec.startswith("#") and len(spec) == 7:
        try:
            red, green, blue = (int(spec[i : i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            return None
        return f"38;2;{red};{green};{blue}"
    if spec.isdigit():
        number = int(spec)
        if number < 8:
            return str(30 + number)
        if number < 16:
            return str(90 + number - 8)
        if number < 256:
            return f"38;5;{number}"
    return None


def _ansi_enabled() -> bool:
    mode = std._colors
    if mode == ColorMode.OFF:
        return False
    if mode == ColorMode.ON:
        return True
    if os.environ.get("NO_COLOR"):
        return False
    stream = std._stream()
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return False


def _paint(text: str, color: str | None, bold: bool = False) -> str:
    if not _ansi_enabled():
        return text
    codes = []
    if bold:
        codes.append("1")
    if color:
        code = _fg_code(color)
        if code:
            codes.append(code)
    if not codes:
        return text
    prefix = f"\x1b[{';'.join(codes)}m"
    return "\n".join(
        f"{prefix}{line}\x1b[0m" if line else line for line in text.split("\n")
    )


@dataclass(frozen=True)
class _Style:
    fg: str | None = None
    bold: bool = False
    left_border: bool = False
    border_color: str | None = None
    padding_left: int = 0

    def render(self, *parts: str) -> str:
        lines = " ".join(parts).split("\n")
        width = max(_width(line) for line in lines)
        border = _paint("│", self.border_color) if self.left_border else ""
        pad = " " * self.padding_left
        return "\n".join(
            border
            + pad
            + _paint(line + " " * (width - _width(line)), self.fg, self.bold)
            for line in lines
        )


def _pad_lines(lines: list[str]) -> list[str]:
    width = max((_width(line) for line in lines), default=0)
    return [line + " " * (width - _width(line)) for line in lines]


def _join_vertical(lines: list[str]) -> str:
    return "\n".join(_pad_lines(lines))


def _join_horizontal(*blocks: list[str]) -> str:
    height = max(len(block) for block in blocks)
    padded = []
    for block in blocks:
        block = _pad_lines(block)
        width = _width(block[0]) if block else 0
        padded.append(block + [" " * width] * (height - len(block)))
    return "\n".join("".join(row) for row in zip(*padded))


def _rounded_box(text: str, left: bool, right: bool) -> list[str]:
    lines = text.split("\n")
    width = max(_width(line) for line in lines)
    color = _palette["border"]
    inner = "─" * (width + 2)
    top = ("╭" if left else "") + inner + ("╮" if right else "")
    bottom = ("╰" if left else "") + inner + ("╯" if right else "")
    side = _paint("│", color)
    middle = [
        (side if left else "")
        + " "
        + line
        + " " * (width - _width(line))
        + " "
        + (side if right else "")
        for line in lines
    ]
    return [_paint(top, color), *middle, _paint(bottom, color)]


def _go_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding spaces only between two non-string operands."""
    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_go_str(arg))
        previous_is_str = is_str
    return "".join(parts)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


# ------------------------------------------------------------------ spinner


class _Spinner:
    """A terminal spinner that only runs when stdout is a terminal."""

    def __init__(self) -> None:
        self.suffix = _SPINNER_TEXT
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        with self._lock:
            if self._thread is not None:
                return
            try:
                if not sys.stdout.isatty():
                    return
            except (AttributeError, ValueError):
                return
            self._stop.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    def stop(self) -> None:
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._stop.set()
            thread.join()
            self._thread = None
            sys.stdout.write("\r\x1b[K")
            sys.stdout.flush()

    def _spin(self) -> None:
        index = 0
        while not self._stop.is_set():
            frame = _SPINNER_FRAMES[index % len(_SPINNER_FRAMES)]
            sys.stdout.write(f"\r\x1b[K{frame}{self.suffix}")
            sys.stdout.flush()
            index += 1
            self._stop.wait(_SPINNER_INTERVAL)


# ------------------------------------------------------------------- logger


class Logger:
    """A levelled writer that keeps the spinner out of the way of output."""

    def __init__(
        self, level: Level = Level.INFO, out: TextIO | None = None
    ) -> None:
        self._level = Level(level)
        self._out = out
        self._lock = threading.Lock()
        self._colors = ColorMode.AUTO
        self._names: list[str] = []
        self._spinner = _Spinner()

    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @contextmanager
    def _spinner_paused(self) -> Iterator[None]:
        was_active = self._spinner.active
        if was_active:
            self._spinner.stop()
        try:
            yield
        finally:
            if was_active:
                self._spinner.start()

    def set_level(self, level: Level) -> None:
        with self._lock:
            self._level = Level(level)

    def set_output(self, out: TextIO | None) -> None:
        with self._lock:
            self._out = out

    def start_spinner(self) -> None:
        self._spinner.start()

    def stop_spinner(self) -> None:
        self._spinner.stop()

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def _bordered(self, color: str | None, args: tuple[str, ...]) -> str:
        return _Style(
            left_border=True, border_color=color, padding_left=_PADDING
        ).render(*args)

    def debug(self, *args: str) -> None:
        self.log(Level.DEBUG, self._bordered(_palette["border"], args))

    def error(self, *args: str) -> None:
        self.log(Level.ERROR, self._bordered(_palette["red"], args))

    def warn(self, *args: str) -> None:
        self.log(Level.WARN, self._bordered(_palette["yellow"], args))

    def infof(self, format: str, *args: Any) -> None:
        self.logf(Level.INFO, format, *args)

    def debugf(self, format: str, *args: Any) -> None:
        self.logf(Level.DEBUG, format, *args)

    def errorf(self, format: str, *args: Any) -> None:
        self.logf(Level.ERROR, format, *args)

    def warnf(self, format: str, *args: Any) -> None:
        self.logf(Level.WARN, format, *args)

    def log(self, level: Level, *args: Any) -> None:
        if self.is_level_enabled(level):
            self.println(*args)

    def logf(self, level: Level, format: str, *args: Any) -> None:
        if self.is_level_enabled(level):
            self.printf(format, *args)

    def _update_suffix(self) -> None:
        if self._names:
            self._spinner.suffix = f"{_SPINNER_TEXT}: {', '.join(self._names)}"
        else:
            self._spinner.suffix = _SPINNER_TEXT

    def set_name(self, name: str) -> None:
        with self._lock, self._spinner_paused():
            self._names.append(name)
            self._update_suffix()

    def unset_name(self, name: str) -> None:
        with self._lock, self._spinner_paused():
            self._names = [n for n in self._names if n != name]
            self._update_suffix()

    def println(self, *args: Any) -> None:
        with self._lock, self._spinner_paused():
            stream = self._stream()
            stream.write(" ".join(_go_str(a) for a in args) + "\n")
            stream.flush()

    def printf(self, format: str, *args: Any) -> None:
        with self._lock, self._spinner_paused():
            stream = self._stream()
            stream.write(_format(format, args))
            stream.flush()

    def is_level_enabled(self, level: Level) -> bool:
        return self._level >= level


std = Logger()


@dataclass(frozen=True)
class StyleLogger:
    """Logs info messages through a configurable style."""

    _style: _Style = _Style()

    def with_left_border(self, color: str | None) -> StyleLogger:
        return StyleLogger(
            replace(self._style, left_border=True, border_color=color)
        )

    def with_padding(self, m: int) -> StyleLogger:
        return StyleLogger(replace(self._style, padding_left=m))

    def info(self, s: str) -> None:
        info(_join_vertical(self._style.render(s).split("\n")))


# ------------------------------------------------------------------ builder


class LogBuilder:
    """Accumulates aligned, prefixed lines and logs them at once.

    A disabled builder ignores everything added to it and logs nothing.
    """

    def __init__(self, level: Level, prefix: str, enabled: bool = True) -> None:
        self.level = Level(level)
        self.prefix = prefix
        self.enabled = enabled
        self._parts: list[str] = []

    def add(self, prefix: str, data: Any) -> LogBuilder:
        if not self.enabled:
            return self

        if isinstance(data, str):
            lines = data.strip().split("\n")
        elif isinstance(data, (list, tuple)):
            lines = [str(item) for item in data]
        else:
            lines = _go_str(data).split("\n")

        for index, raw in enumerate(lines):
            line = raw.strip()
            if not line:
                continue
            if not self._parts:
                self._parts.append(self.prefix + prefix + line + "\n")
            elif index == 0:
                self._parts.append(
                    " " * len(self.prefix) + prefix + line + "\n"
                )
            else:
                self._parts.append(
                    " " * (len(self.prefix) + len(prefix)) + line + "\n"
                )
        return self

    def log(self) -> None:
        if not self.enabled:
            return
        emit = {
            Level.DEBUG: debug,
            Level.INFO: info,
            Level.ERROR: error,
            Level.WARN: warn,
        }[self.level]
        emit(str(self))

    def __str__(self) -> str:
        return "".join(self._parts)


def builder(level: Level, prefix: str) -> LogBuilder:
    """Return a builder, disabled when ``level`` is not enabled."""
    return LogBuilder(level, prefix, enabled=std.is_level_enabled(level))


# ------------------------------------------------------- module-level API


def colors() -> ColorMode:
    return std._colors


def colorized() -> bool:
    return std._colors in (ColorMode.AUTO, ColorMode.ON)


def start_spinner() -> None:
    std.start_spinner()


def stop_spinner() -> None:
    std.stop_spinner()


def styled() -> StyleLogger:
    return StyleLogger()


def debug(*args: Any) -> None:
    text = _sprint(args).strip()
    std.debug(_Style(fg=_palette["gray"]).render(text))


def debugf(format: str, *args: Any) -> None:
    debug(_format(format, args))


def info(*args: Any) -> None:
    std.info(*args)


def info_pad(s: str) -> None:
    info(_Style(left_border=True, border_color=_palette["cyan"]).render(s))


def infof(format: str, *args: Any) -> None:
    std.infof(format, *args)


def error(*args: Any) -> None:
    std.error(red(_sprint(args)))


def errorf(format: str, *args: Any) -> None:
    error(_format(format, args))


def warn(*args: Any) -> None:
    std.warn(yellow(_sprint(args)))


def warnf(format: str, *args: Any) -> None:
    warn(_format(format, args))


def println(*args: Any) -> None:
    std.println(*args)


def printf(format: str, *args: Any) -> None:
    std.printf(format, *args)


def set_level(level: Level) -> None:
    std.set_level(level)


def _disable_palette() -> None:
    for key in _palette:
        _palette[key] = None


def _set_color(key: str, code: Any) -> None:
    if isinstance(code, bool):
        return
    if isinstance(code, int):
        code = str(code)
    if not isinstance(code, str) or not code:
        return
    _palette[key] = code


def set_colors(colors: Any) -> None:
    """Configure colours from a config value: a string, a bool or a mapping."""
    if colors is None:
        return
    if isinstance(colors, str):
        if colors == "on":
            std._colors = ColorMode.ON
        elif colors == "off":
            std._colors = ColorMode.OFF
            _disable_palette()
        else:
            std._colors = ColorMode.AUTO
    elif isinstance(colors, bool):
        if colors:
            std._colors = ColorMode.ON
        else:
            std._colors = ColorMode.OFF
            _disable_palette()
    elif isinstance(colors, dict):
        std._colors = ColorMode.ON
        for key in ("red", "green", "yellow", "cyan", "gray"):
            _set_color(key, colors.get(key))
        _set_color("border", colors.get("gray"))
    else:
        std._colors = ColorMode.AUTO


def cyan(s: str) -> str:
    return _Style(fg=_palette["cyan"]).render(s)


def green(s: str) -> str:
    return _Style(fg=_palette["green"]).render(s)


def red(s: str) -> str:
    return _Style(fg=_palette["red"]).render(s)


def yellow(s: str) -> str:
    return _Style(fg=_palette["yellow"]).render(s)


def gray(s: str) -> str:
    return _Style(fg=_palette["gray"]).render(s)


def bold(s: str) -> str:
    if not colorized():
        return _Style().render(s)
    return _Style(bold=True).render(s)


def log_meta(hook_name: str) -> None:
    """Print the banner with the version and the hook name."""
    name = "🥊 lefthook " if colorized() else "lefthook "
    left = cyan(name) + gray(f"v{version(False)}")
    right = gray("hook: ") + bold(hook_name)
    info(
        _join_horizontal(
            _rounded_box(left, left=True, right=False),
            _rounded_box(right, left=False, right=True),
        )
    )


def success(indent: int, name: str) -> None:
    fmt = "%s✔️ %s\n" if colorized() else "%s✓ %s\n"
    infof(fmt, "  " * indent, green(name))


def failure(indent: int, name: str, fail_text: str) -> None:
    if fail_text:
        fail_text = f": {fail_text}"
    fmt = "%s🥊 %s%s\n" if colorized() else "%s✗ %s%s\n"
    infof(fmt, "  " * indent, red(name), red(fail_text))


def separate(s: str) -> None:
    margin = " " * _SEPARATOR_MARGIN
    rule = [
        margin + " " * _SEPARATOR_WIDTH,
        margin + _paint("─" * _SEPARATOR_WIDTH, _palette["border"]),
    ]
    info(_join_vertical(rule + s.split("\n")))


def set_output(out: TextIO | None) -> None:
    std.set_output(out)


def parse_level(lvl: str) -> Level:
    """Parse a level name; only error, info and debug are accepted."""
    levels = {"error": Level.ERROR, "info": Level.INFO, "debug": Level.DEBUG}
    try:
        return levels[lvl.lower()]
    except KeyError:
        raise ValueError(f'not a valid Level: "{lvl}"') from None


def set_name(name: str) -> None:
    std.set_name(name)


def unset_name(name: str) -> None:
    std.unset_name(name)