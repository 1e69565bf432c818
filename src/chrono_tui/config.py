from __future__ import annotations

import os
import logging
from pathlib import Path

import dotenv
from pydantic import BaseModel, ConfigDict, Field

from .big_digits import GlyphStyle

log = logging.getLogger(__name__)

ENV_PREFIX = 'CHRONO_'
TRUTHY = ('1', 'true', 'yes', 'on')

class Config(BaseModel):
    '''
    Resolved once at startup, then passed down. Nothing below the CLI
    reads the environment.
    '''
    glyph_style: GlyphStyle = 'unicode'
    tick_seconds: float = Field(default=0.03, gt=0.0, le=1.0)
    log_dir: Path = Field(default_factory=Path.cwd)
    enable_session_log: bool = False
    debug: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def fromEnv(cls, load_dotenv: bool = True, **overrides) -> Config:
        '''
        `overrides` win over the environment, e.g. CLI flags.
        '''
        if load_dotenv:
            dotenv.load_dotenv()
        raw: dict = {}
        glyphs = os.getenv(ENV_PREFIX + 'GLYPHS')
        if glyphs:
            raw['glyph_style'] = glyphs.strip().lower()
        tick = os.getenv(ENV_PREFIX + 'TICK_SECONDS')
        if tick:
            raw['tick_seconds'] = tick
        log_dir = os.getenv(ENV_PREFIX + 'LOG_DIR')
        if log_dir:
            raw['log_dir'] = log_dir
        debug = os.getenv(ENV_PREFIX + 'DEBUG')
        if debug:
            raw['debug'] = debug.strip().lower() in TRUTHY
        raw.update(overrides)
        config = cls.model_validate(raw)
        log.debug('%r', config)
        return config
