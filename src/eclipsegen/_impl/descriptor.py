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
Assembly of the two Eclipse descriptors of a project (``.project`` and
``.classpath``) and their XML rendering.
"""

from __future__ import annotations

__all__ = ["ProjectDescriptor", "ClasspathDescriptor", "EclipseDescriptors", "assemble"]

from collections import namedtuple
from typing import Optional

from .classify import referenced_projects
from .classpath import ClasspathBuilder, unique_dependencies
from .model import Project
from .natures import GenerationContext, resolve_tooling
from .support.xmldoc import XMLDoc


class ProjectDescriptor(object):
    """Contents of a ``.project`` file."""

    def __init__(self, name: str, natures, builders, projects=()):
        self.name = name
        self.natures = list(natures)
        self.builders = list(builders)
        self.projects = list(projects)

    def xml(self) -> str:
        out = XMLDoc()
        out.open('projectDescription')
        out.element('name', data=self.name)
        out.element('comment', data='')
        out.open('projects')
        for name in self.projects:
            out.element('project', data=name)
        out.close('projects')
        out.open('buildSpec')
        for builder in self.builders:
            out.open('buildCommand')
            out.element('name', data=builder)
            out.element('arguments', data='')
            out.close('buildCommand')
        out.close('buildSpec')
        out.open('natures')
        for nature in self.natures:
            out.element('nature', data=nature)
        out.close('natures')
        out.close('projectDescription')
        return out.xml(indent='\t', newl='\n')

    def __repr__(self):
        return f'ProjectDescriptor({self.name!r})'


class ClasspathDescriptor(object):
    """Contents of a ``.classpath`` file."""

    def __init__(self, entries):
        self.entries = list(entries)

    def entries_of_kind(self, kind: str) -> list:
        return [e for e in self.entries if e.kind == kind]

    def paths(self, kind: str) -> list:
        return [e.path for e in self.entries_of_kind(kind)]

    def entry(self, path: str, kind: Optional[str] = None):
        """Gets the entry for `path` or None."""
        for e in self.entries:
            if e.path == path and (kind is None or e.kind == kind):
                return e
        return None

    @property
    def default_output(self) -> str:
        outputs = self.paths('output')
        assert len(outputs) == 1, outputs
        return outputs[0]

    def xml(self) -> str:
        out = XMLDoc()
        out.open('classpath')
        for e in self.entries:
            out.element('classpathentry', e.attributes())
        out.close('classpath')
        return out.xml(indent='\t', newl='\n')


EclipseDescriptors = namedtuple('EclipseDescriptors', ['project', 'classpath'])


def assemble(project: Project, context: Optional[GenerationContext] = None) -> EclipseDescriptors:
    """
    Computes both descriptors of `project`. Nothing is returned if one of
    them cannot be computed; errors such as
    :class:`~eclipsegen._impl.errors.MissingArtifact` propagate to the caller.
    """
    tooling = resolve_tooling(project, context)
    entries = ClasspathBuilder(project, tooling.containers).build()
    projects = referenced_projects(project, unique_dependencies(project))
    return EclipseDescriptors(
        ProjectDescriptor(project.eclipse_name, tooling.natures, tooling.builders, projects),
        ClasspathDescriptor(entries),
    )
