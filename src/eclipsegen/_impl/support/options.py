#
# ----------------------------------------------------------------------------------------------------
#
# Copyright (c) 2026, 2026, Oracle and/or its affiliates. All rights reserved.
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#
# This code is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 2 only, as
# published by the Free Software Foundation.
#
# This code is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# version 2 for more details (a copy is included in the LICENSE file that
# accompanied this code).
#
# You should have received a copy of the GNU General Public License version
# 2 along with this work; if not, write to the Free Software Foundation,
# Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Please contact Oracle, 500 Oracle Parkway, Redwood Shores, CA 94065 USA
# or visit www.oracle.com if you need additional information or have any
# questions.
#
# ----------------------------------------------------------------------------------------------------
#

"""
Global command line options.

The namespace is populated with defaults so that library users (and tests)
that never go through the command line still see sensible values.
"""

from __future__ import annotations

__all__ = ["_opts", "set_opts"]

from argparse import Namespace

_opts = Namespace(
    verbose=False,
    very_verbose=False,
    warn=True,
    quiet=False,
    backup_modified=False,
)


def set_opts(parsed: Namespace) -> Namespace:
    """
    Copies the values of `parsed` into the global options namespace.
    """
    _opts.__dict__.update(vars(parsed))
    return _opts
