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
Computation of the entries of a project's ``.classpath`` file.

Entries are emitted in this order: source folders (main code, main
resources, test code, test resources), classpath containers, entries derived
from dependencies and finally the single default output folder.
"""

from __future__ import annotations

__all__ = ["ClasspathBuilder", "build_classpath", "unique_dependencies"]

from collections import OrderedDict
from typing import Iterable, Optional

from .classify import classify_all
from .entries import ClasspathEntry, eclipse_path
from .model import Project, SourceRoot


def unique_dependencies(project: Project) -> list:
    """The compile dependencies of `project` followed by its test dependencies, without duplicates."""
    deps = []
    for dep in project.dependencies + project.test_dependencies:
        if dep not in deps:
            deps.append(dep)
    return deps


class ClasspathBuilder(object):
    """
    Builds the classpath entries of one project. Source folders are
    deduplicated by path: a folder declared twice (e.g. as code and as
    resources) yields one entry whose excludes are the union of both.
    """

    def __init__(self, project: Project, containers: Iterable[str] = (), m2_repo_var: Optional[str] = None):
        self.project = project
        self.containers = list(containers)
        self.m2_repo_var = m2_repo_var if m2_repo_var is not None else project.eclipse.m2_repo_var
        self.default_output = eclipse_path(project, project.layout.default_output)
        self._sources = OrderedDict()
        self._dependencies = OrderedDict()

    def _output_path(self, output_dir: str) -> Optional[str]:
        output = eclipse_path(self.project, output_dir)
        return None if output == self.default_output else output

    def add_source(self, root: SourceRoot, output_dir: str) -> ClasspathEntry:
        path = eclipse_path(self.project, root.path)
        entry = self._sources.get(path)
        if entry is not None:
            entry.merge_excludes(root.excludes)
            return entry
        entry = ClasspathEntry('source', path, output_path=self._output_path(output_dir), exclude_patterns=root.excludes)
        self._sources[path] = entry
        return entry

    def add_dependency(self, entry: ClasspathEntry) -> None:
        if entry.kind == 'source' and not entry.project_reference and entry.path in self._sources:
            return
        self._dependencies.setdefault((entry.kind, entry.path), entry)

    def build(self) -> list:
        project = self.project
        layout = project.layout
        for roots, output_dir in ((project.compile_sources, layout.default_output),
                                  (project.resources, layout.resources_output),
                                  (project.test_sources, layout.test_output),
                                  (project.test_resources, layout.test_resources_output)):
            for root in roots:
                self.add_source(root, output_dir)

        for entry in classify_all(project, unique_dependencies(project), self.m2_repo_var):
            self.add_dependency(entry)

        entries = list(self._sources.values())
        entries += [ClasspathEntry('container', container) for container in self.containers]
        entries += self._dependencies.values()
        entries.append(ClasspathEntry('output', self.default_output))
        assert len([e for e in entries if e.kind == 'output']) == 1, f'ambiguous output mapping for {project}'
        return entries


def build_classpath(project: Project, containers: Iterable[str] = ()) -> list:
    return ClasspathBuilder(project, containers).build()
