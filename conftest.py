# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from __future__ import absolute_import, division, print_function

from os import path

pytest_plugins = ['numtour.util.pytest_config']

this_dir = path.dirname(__file__)
collect_ignore = [path.join(this_dir, 'setup.py'),
                  path.join(this_dir, 'examples')]
