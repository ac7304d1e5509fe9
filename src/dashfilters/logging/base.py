# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

import logging
import warnings
from typing import TextIO

from ..model.settings import load_settings

showwarning_default = warnings.showwarning

loggernames = [
    "dashfilters",
    "py.warnings",
]

format_string = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"


def showwarning(message, category, filename, lineno, _=None, line=None):
    s = warnings.formatwarning(message, category, filename, lineno, line)
    logger = logging.getLogger("py.warnings")
    logger.warning(f"{s}", stack_info=True)


def remove_handlers(logger: logging.Logger) -> None:
    for hdlr in list(logger.handlers):
        logger.removeHandler(hdlr)


def setup(levelno: int | None = None, stream: TextIO | None = None) -> None:
    if levelno is None:
        levelno = logging.getLevelName(load_settings()["log_level"])
        assert isinstance(levelno, int)

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(logging.Formatter(format_string))
    stream_handler.setLevel(levelno)

    for loggername in loggernames:
        logger = logging.getLogger(loggername)
        remove_handlers(logger)
        logger.propagate = False

        logger.addHandler(stream_handler)

        logger.setLevel(levelno)

    warnings.showwarning = showwarning


def teardown() -> None:
    for loggername in loggernames:
        logger = logging.getLogger(loggername)
        remove_handlers(logger)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    warnings.showwarning = showwarning_default
