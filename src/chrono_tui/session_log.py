from __future__ import annotations

import logging
import typing as tp
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

log = logging.getLogger(__name__)

def logFileName(started_at: datetime) -> str:
    return started_at.strftime('chrono_session_%Y%m%d_%H%M%S.log')

class SessionLog:
    '''
    Append-only text log of session events, one line per event.
    Never read back. Failures to open or write are logged and skipped,
    so a broken sink can never stop the stopwatch.
    '''

    def __init__(self, /, directory: Path, started_at: datetime) -> None:
        self.path = Path(directory) / logFileName(started_at)
        self.__f: tp.TextIO | None = None

    @property
    def is_open(self) -> bool:
        return self.__f is not None

    def open(self) -> bool:
        if self.__f is not None:
            return True
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.__f = self.path.open('a', encoding='utf-8')
        except OSError as e:
            log.warning('Session log disabled, cannot open %s: %s', self.path, e)
            self.__f = None
            return False
        log.info('Session log at %s', self.path)
        return True

    def write(self, line: str) -> bool:
        if self.__f is None:
            return False
        try:
            self.__f.write(line + '\n')
            self.__f.flush()
        except (OSError, ValueError) as e:
            # ValueError: the file was closed under us.
            log.warning('Skipped session log line %r: %s', line, e)
            return False
        return True

    def close(self) -> None:
        f, self.__f = self.__f, None
        if f is None:
            return
        try:
            f.close()
        except OSError as e:
            log.warning('Failed to close session log %s: %s', self.path, e)

    @contextmanager
    def Context(self) -> tp.Generator[SessionLog, None, None]:
        self.open()
        try:
            yield self
        finally:
            self.close()
