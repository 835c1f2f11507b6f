"""Logging for the game: a terse console line, and an optional round log."""

import json
import logging
import sys
from datetime import datetime, timezone

LEVEL_COLORS = {
    'DEBUG': '\033[90m',
    'INFO': '\033[36m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[1;31m',
}
RESET = '\033[0m'


def format_fields(data):
    """score=3 speed=2.1 ... with floats trimmed to one decimal."""
    parts = []
    for key, value in data.items():
        if isinstance(value, float):
            value = f'{value:.1f}'
        parts.append(f'{key}={value}')
    return ' '.join(parts)


class ConsoleFormatter(logging.Formatter):
    def __init__(self, color=True):
        super().__init__()
        self.color = color

    def format(self, record):
        ts = datetime.now().strftime('%H:%M:%S')
        name = record.name.replace('flappy.', '')
        line = f'{ts} {record.levelname[0]} {name:<11} {record.getMessage()}'
        data = getattr(record, 'data', None)
        if data:
            line = f'{line}  {format_fields(data)}'
        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'
        if not self.color:
            return line
        return f'{LEVEL_COLORS.get(record.levelname, "")}{line}{RESET}'


class RoundLogFormatter(logging.Formatter):
    """One JSON object per line; the event's fields sit at the top level."""

    def format(self, record):
        entry = {
            'ts': datetime.now(timezone.utc).isoformat(timespec='milliseconds'),
            'level': record.levelname.lower(),
            'source': record.name.replace('flappy.', ''),
            'event': record.getMessage(),
        }
        entry.update(getattr(record, 'data', None) or {})
        return json.dumps(entry, default=str)


def setup_logging(level='info', log_file=None):
    root = logging.getLogger('flappy')
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
    root.addHandler(console)

    # Rounds can be replayed or charted from this file
    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(RoundLogFormatter())
        root.addHandler(fh)


def get_logger(name):
    return logging.getLogger(f'flappy.{name}')
