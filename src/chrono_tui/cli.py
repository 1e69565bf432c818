from __future__ import annotations

import sys
import logging
import logging.handlers
from datetime import datetime

import typer
from pydantic import ValidationError

from .config import Config
from .duration_engine import DurationEngine
from .session_controller import SessionController
from .session_log import SessionLog
from .UI import UI

log = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

DEBUG_LOG_NAME = 'chrono_tui.debug.log'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

def setupLogging(config: Config) -> logging.Handler:
    '''
    The TUI owns the terminal while it runs, so nothing may write to it.
    Debug output goes to a file. Otherwise warnings are held back and
    reach stderr when `teardownLogging()` closes the handler.
    '''
    root = logging.getLogger()
    debug_error: OSError | None = None
    if config.debug:
        try:
            config.log_dir.mkdir(parents=True, exist_ok=True)
            fileHandler = logging.FileHandler(
                config.log_dir / DEBUG_LOG_NAME, encoding='utf-8',
            )
        except OSError as e:
            debug_error = e
        else:
            fileHandler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fileHandler)
            root.setLevel(logging.DEBUG)
            return fileHandler

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setFormatter(logging.Formatter(LOG_FORMAT))
    deferred = logging.handlers.MemoryHandler(
        capacity=10_000,
        flushLevel=logging.CRITICAL + 1,    # only on close
        target=stderr,
    )
    deferred.setLevel(logging.WARNING)
    root.addHandler(deferred)
    if debug_error is not None:
        log.warning(
            'Debug log unavailable in %s: %s', config.log_dir, debug_error,
        )
    return deferred

def teardownLogging(handler: logging.Handler) -> None:
    logging.getLogger().removeHandler(handler)
    handler.close()

@app.command()
def main(
    log_session: bool = typer.Option(
        False, "--log", "-l",
        help="Append session events to a timestamped file in CHRONO_LOG_DIR.",
    ),
) -> None:
    """Terminal stopwatch. Keys: r reset, l lap, s pause/resume, q quit."""
    try:
        config = Config.fromEnv(enable_session_log=log_session)
    except ValidationError as e:
        typer.echo(f'Invalid configuration: {e}', err=True)
        raise typer.Exit(code=1)
    handler = setupLogging(config)
    try:
        sessionLog = None
        if config.enable_session_log:
            sessionLog = SessionLog(config.log_dir, started_at=datetime.now())
        controller = SessionController(DurationEngine(), sessionLog)

        ui = UI(controller, config)
        try:
            ui.run()
        except Exception:
            log.exception('Terminal UI failed')
            raise typer.Exit(code=1)
        # textual reports failures inside the app through return_code
        if ui.return_code:
            log.error('Terminal UI exited with code %s', ui.return_code)
            raise typer.Exit(code=ui.return_code)
    finally:
        teardownLogging(handler)

if __name__ == '__main__':
    app()
