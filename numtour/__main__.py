# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Run the numtour tour: ``python -m numtour``."""

from __future__ import absolute_import, print_function

import sys

from numtour.tour import run_tour
from numtour.util.logging_config import setup_logging


def main():
    setup_logging()
    run_tour()
    return 0


if __name__ == '__main__':
    sys.exit(main())
