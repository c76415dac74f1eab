# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from __future__ import absolute_import

from .exceptions import *
from .logging_config import *
from .numerics import *
from .testutils import *
from .utility import *

__all__ = ()
__all__ += exceptions.__all__
__all__ += logging_config.__all__
__all__ += numerics.__all__
__all__ += testutils.__all__
__all__ += utility.__all__
