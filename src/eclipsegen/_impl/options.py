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
Resolution of Eclipse options through the project hierarchy.

A project that does not set an option inherits the value of its closest
ancestor that does; the root project falls back to the built-in defaults.
Resolution is evaluated per project and never written back to the tree.
"""

from __future__ import annotations

__all__ = ["resolve", "EclipseOptions", "builtin_default"]

from .model import ConfigOptions, Project
from .support.envvars import default_m2_repo_var
from .support.ordered_set import OrderedSet


def builtin_default(field: str):
    if field == 'm2_repo_var':
        return default_m2_repo_var()
    if field in ConfigOptions.FIELDS:
        return OrderedSet()
    raise ValueError(f'unknown Eclipse option: {field}')


def resolve(project: Project, field: str):
    """
    Gets the effective value of the Eclipse option `field` for `project`.
    Ordered set values are returned as copies.
    """
    if field not in ConfigOptions.FIELDS:
        raise ValueError(f'unknown Eclipse option: {field}')
    p = project
    while p is not None:
        value = getattr(p.options, field)
        if value is not None:
            return OrderedSet(value) if isinstance(value, OrderedSet) else value
        p = p.parent
    return builtin_default(field)


class EclipseOptions(object):
    """Read-only view of the resolved Eclipse options of a project."""

    def __init__(self, project: Project):
        self.project = project

    @property
    def natures(self) -> OrderedSet:
        return resolve(self.project, 'natures')

    @property
    def builders(self) -> OrderedSet:
        return resolve(self.project, 'builders')

    @property
    def classpath_containers(self) -> OrderedSet:
        return resolve(self.project, 'classpath_containers')

    @property
    def m2_repo_var(self) -> str:
        return resolve(self.project, 'm2_repo_var')
