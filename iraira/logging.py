"""
Iraira Logging

Two channels:

- Console: `get_logger(module)` prints `[module] LEVEL: message` lines,
  filtered by a default level and optional per-module levels.
- Records: `emit_record(channel, {...})` hands a JSON-serializable dict
  to whatever sink is registered for that channel. The game writes one
  record per finished run on the 'runs' channel.

Usage:
    from iraira.logging import get_logger

    log = get_logger('game_mode')
    log.info("Run started")

    from iraira.logging import FileSink, emit_record, register_sink
    register_sink('runs', FileSink())
    emit_record('runs', {'outcome': 'victory', 'score_ms': 12345})

Environment:
    IRAIRA_LOG_LEVEL=DEBUG            # default level
    IRAIRA_LOG_GAME_MODE=TRACE        # level for one module
    IRAIRA_LOG_DIR=/tmp/iraira-logs   # where FileSink writes
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Console levels; TRACE is for per-tick detail."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_NAMES = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARN': LogLevel.WARNING,
    'WARNING': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'OFF': LogLevel.OFF,
}

_ENV_PREFIX = 'IRAIRA_LOG_'
_ENV_RESERVED = ('IRAIRA_LOG_LEVEL', 'IRAIRA_LOG_DIR')

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
}


def _parse_level(name: str) -> LogLevel:
    """Level for a name; unknown names mean INFO."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Set the default level, per-module levels and the FileSink directory."""
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def disable_logging() -> None:
    """Silence the console channel. Record sinks are unaffected."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def get_log_dir() -> str:
    """Directory FileSink writes to.

    configure_logging(log_dir=...) wins, then IRAIRA_LOG_DIR, then
    $XDG_DATA_HOME/iraira/logs (~/.local/share when unset).
    """
    configured = _config.get('log_dir') or os.environ.get('IRAIRA_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())
    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'iraira' / 'logs')


def _apply_env() -> None:
    env = os.environ
    if 'IRAIRA_LOG_LEVEL' in env:
        _config['default_level'] = _parse_level(env['IRAIRA_LOG_LEVEL'])
    for key, value in env.items():
        if key.startswith(_ENV_PREFIX) and key not in _ENV_RESERVED:
            _config['module_levels'][key[len(_ENV_PREFIX):].lower()] = _parse_level(value)


_apply_env()


# =============================================================================
# Console channel
# =============================================================================

class IrairaLogger:
    """Console logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _write(self, level: LogLevel, label: str, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}", file=sys.stdout)

    def trace(self, msg: str, *args) -> None:
        self._write(LogLevel.TRACE, 'TRACE', msg, args)

    def debug(self, msg: str, *args) -> None:
        self._write(LogLevel.DEBUG, 'DEBUG', msg, args)

    def info(self, msg: str, *args) -> None:
        self._write(LogLevel.INFO, 'INFO', msg, args)

    def warning(self, msg: str, *args) -> None:
        self._write(LogLevel.WARNING, 'WARN', msg, args)

    def error(self, msg: str, *args) -> None:
        self._write(LogLevel.ERROR, 'ERROR', msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> IrairaLogger:
    """Cached logger for a module name."""
    return IrairaLogger(module)


# =============================================================================
# Record channel
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for a channel."""

    @abstractmethod
    def flush(self) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        ...


class FileSink(LogSink):
    """One `<session>_<channel>.jsonl` file per channel.

    Files are opened lazily on the first record. Each record gets a
    `wall_time` field unless it already has one.

    Args:
        log_dir: Output directory (default: get_log_dir() at first write)
        session_name: File name prefix (default: local timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _path_for(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    def _file_for(self, module: str) -> TextIO:
        handle = self._files.get(module)
        if handle is None:
            path = self._path_for(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = self._files[module] = open(path, 'a')
        return handle

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        line = record if 'wall_time' in record else {'wall_time': time.time(), **record}
        self._file_for(module).write(json.dumps(line) + "\n")

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for handle in self._files.values():
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by channel."""
        return {module: self._path_for(module) for module in self._files}


class NullSink(LogSink):
    """Accepts and drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route a channel's records to a sink, replacing any previous one."""
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the channel's sink.

    Returns:
        False when no sink is registered for the channel
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close every registered sink and forget them."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
