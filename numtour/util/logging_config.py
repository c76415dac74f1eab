# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Logging setup for the ``numtour`` logger hierarchy."""

from __future__ import absolute_import, division, print_function

import logging
import os
import sys

__all__ = ('LOG_LEVEL_ENV', 'default_log_level', 'setup_logging')


LOG_LEVEL_ENV = 'NUMTOUR_LOG_LEVEL'


def default_log_level():
    """Return the level named by ``NUMTOUR_LOG_LEVEL``, else ``WARNING``.

    Both level names (``'DEBUG'``) and numbers (``'10'``) are accepted.
    """
    value = os.environ.get(LOG_LEVEL_ENV, '').strip()
    if not value:
        return logging.WARNING
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError('`{}` has unknown log level {!r}'
                         ''.format(LOG_LEVEL_ENV, value))
    return level


def setup_logging(level=None, log_file=None, stream=None):
    """Configure the ``numtour`` logger.

    Parameters
    ----------
    level : int, optional
        Logging level, e.g. ``logging.DEBUG``. Default: `default_log_level`.
    log_file : str, optional
        Path of a file that receives the log records as well.
    stream : file-like, optional
        Stream for the console handler. Default: ``sys.stderr``.

    Returns
    -------
    logger : `logging.Logger`
    """
    if level is None:
        level = default_log_level()

    logger = logging.getLogger('numtour')
    logger.setLevel(level)

    # Avoid duplicate records when called repeatedly
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(
        sys.stderr if stream is None else stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w',
                                           encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('logging initialized at level %s',
                 logging.getLevelName(level))
    return logger
