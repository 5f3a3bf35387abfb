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

from __future__ import annotations

__all__ = ["ClasspathEntry", "VCS_EXCLUDES", "eclipse_path", "absolute_path", "is_inside"]

import os
from os.path import abspath, isabs, normpath, relpath
from typing import Iterable, Optional

from .support.logging import warn
from .support.ordered_set import OrderedSet

#: Version control metadata that never belongs to a source folder
VCS_EXCLUDES = ('**/.svn/', '**/CVS/')


def _slashes(path: str) -> str:
    # Yes, even on Windows...
    return path.replace(os.sep, '/').replace('\\', '/')


def _is_parent_relative(rel: str) -> bool:
    return rel == os.pardir or rel.startswith(os.pardir + os.sep)


def is_inside(project, path: str) -> bool:
    """Determines if `path` is `project`'s base directory or below it."""
    return not _is_parent_relative(relpath(abspath(path), project.base_dir))


def eclipse_path(project, path: str) -> str:
    """
    Renders `path` the way a classpath entry of `project` refers to a folder
    of the project: relative to its base directory with forward slashes.
    """
    if not isabs(path):
        return _slashes(normpath(path))
    path = abspath(path)
    rel = relpath(path, project.base_dir)
    if _is_parent_relative(rel):
        warn(f'{path} is outside of {project.base_dir}', context=project)
    return _slashes(rel)


def absolute_path(path: str) -> str:
    return _slashes(abspath(path))


class ClasspathEntry(object):
    """
    One ``classpathentry`` of an Eclipse ``.classpath`` file.

    Source entries always exclude version control metadata; any excludes
    passed in are merged after those.
    """
    KINDS = {
        'source': 'src',
        'library': 'lib',
        'variable': 'var',
        'container': 'con',
        'output': 'output',
    }

    def __init__(self, kind: str, path: str, output_path: Optional[str] = None, source_attachment_path: Optional[str] = None,
                 exclude_patterns: Optional[Iterable[str]] = None, project_reference: bool = False):
        if kind not in ClasspathEntry.KINDS:
            raise ValueError(f'unknown classpath entry kind: {kind}')
        self.kind = kind
        self.path = _slashes(path)
        self.output_path = _slashes(output_path) if output_path else None
        self.source_attachment_path = _slashes(source_attachment_path) if source_attachment_path else None
        self.exclude_patterns = None
        self.project_reference = project_reference
        if kind == 'source':
            self.exclude_patterns = OrderedSet(VCS_EXCLUDES)
            self.merge_excludes(exclude_patterns or ())
        elif exclude_patterns:
            raise ValueError(f'only source entries can exclude files, not {kind} entry {path}')

    @property
    def xml_kind(self) -> str:
        return ClasspathEntry.KINDS[self.kind]

    def merge_excludes(self, patterns: Iterable[str]) -> None:
        assert self.kind == 'source', self
        self.exclude_patterns.update(patterns)

    def attributes(self) -> dict:
        attributes = {'kind': self.xml_kind, 'path': self.path}
        if self.output_path:
            attributes['output'] = self.output_path
        if self.source_attachment_path:
            attributes['sourcepath'] = self.source_attachment_path
        if self.exclude_patterns:
            attributes['excluding'] = '|'.join(self.exclude_patterns)
        if self.project_reference:
            attributes['combineaccessrules'] = 'false'
        return attributes

    def _comparison_key(self):
        return (self.kind, self.path, self.output_path, self.source_attachment_path,
                tuple(self.exclude_patterns or ()), self.project_reference)

    def __eq__(self, other):
        if not isinstance(other, ClasspathEntry):
            return NotImplemented
        return self._comparison_key() == other._comparison_key()

    __hash__ = None

    def __repr__(self):
        return f'ClasspathEntry({self.kind}, {self.path!r})'
