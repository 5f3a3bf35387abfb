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
Detection of the kind of a project (plain Java, Scala, Eclipse plugin) and
the ordering of the natures, builders and classpath containers that follow
from it.
"""

from __future__ import annotations

__all__ = [
    "EclipseTooling",
    "JAVA",
    "SCALA",
    "PLUGIN",
    "ProjectKind",
    "ResolvedTooling",
    "GenerationContext",
    "selects",
    "has_scala_sources",
    "has_plugin_descriptor",
    "detect_kind",
    "order_tooling",
    "resolve_tooling",
]

import os
from collections import namedtuple
from os.path import exists, isdir
from typing import Iterable, Optional

from .model import Project
from .support.logging import logv
from .support.ordered_set import OrderedSet

EclipseTooling = namedtuple('EclipseTooling', ['key', 'natures', 'builders', 'containers'])

JAVA = EclipseTooling('java',
                      ('org.eclipse.jdt.core.javanature',),
                      ('org.eclipse.jdt.core.javabuilder',),
                      ('org.eclipse.jdt.launching.JRE_CONTAINER',))

SCALA = EclipseTooling('scala',
                       ('ch.epfl.lamp.sdt.core.scalanature',),
                       ('ch.epfl.lamp.sdt.core.scalabuilder',),
                       ('ch.epfl.lamp.sdt.launching.SCALA_CONTAINER',))

PLUGIN = EclipseTooling('plugin',
                        ('org.eclipse.pde.PluginNature',),
                        ('org.eclipse.pde.ManifestBuilder', 'org.eclipse.pde.SchemaBuilder'),
                        ('org.eclipse.pde.core.requiredPlugins',))

_toolings = (JAVA, SCALA, PLUGIN)

#: Short names that select a tooling in the ``natures`` option
_tooling_keys = frozenset(t.key for t in _toolings)

ProjectKind = namedtuple('ProjectKind', ['java', 'scala', 'plugin'])

ResolvedTooling = namedtuple('ResolvedTooling', ['natures', 'builders', 'containers'])


def selects(natures: Iterable[str], tooling: EclipseTooling) -> bool:
    """
    Determines if `natures` explicitly selects `tooling`, either by its short
    name (e.g. ``scala``) or by one of its nature ids.
    """
    natures = set(natures)
    return tooling.key in natures or not natures.isdisjoint(tooling.natures)


def _has_files(directory: str, suffix: str) -> bool:
    if not isdir(directory):
        return False
    for _, _, files in os.walk(directory):
        if any(f.endswith(suffix) for f in files):
            return True
    return False


def has_scala_sources(project: Project) -> bool:
    """
    Determines if a ``.scala`` file exists under the conventional Scala
    directories or under a declared code directory of `project`.
    """
    layout = project.layout
    dirs = [layout.main_scala, layout.test_scala]
    dirs += [r.path for r in project.compile_sources + project.test_sources if r.path not in dirs]
    return any(_has_files(project.path_to(d), '.scala') for d in dirs)


def has_plugin_descriptor(project: Project) -> bool:
    if project.plugin_descriptor is not None:
        return project.plugin_descriptor
    return exists(project.path_to('plugin.xml'))


def detect_kind(project: Project, natures: Optional[Iterable[str]] = None) -> ProjectKind:
    """
    Computes the kind of `project`. An explicit selection through the
    ``natures`` option and the presence of matching files are both signals.
    """
    if natures is None:
        natures = project.eclipse.natures
    natures = list(natures)
    scala = selects(natures, SCALA) or has_scala_sources(project)
    plugin = selects(natures, PLUGIN) or has_plugin_descriptor(project)
    java = selects(natures, JAVA) or scala or plugin or bool(project.compile_sources or project.test_sources)
    kind = ProjectKind(java=java, scala=scala, plugin=plugin)
    logv(f'{project.qualified_name}: {kind}')
    return kind


class GenerationContext(object):
    """
    State shared by one descriptor generation run. Caches the kind of each
    project so that the filesystem is probed at most once per project.
    """

    def __init__(self):
        self._kinds = {}

    def kind(self, project: Project) -> ProjectKind:
        kind = self._kinds.get(project.qualified_name)
        if kind is None:
            kind = detect_kind(project)
            self._kinds[project.qualified_name] = kind
        return kind


def order_tooling(kind: ProjectKind, natures: Iterable[str] = (), builders: Iterable[str] = (), containers: Iterable[str] = ()) -> ResolvedTooling:
    """
    Merges the natures, builders and containers implied by `kind` with the
    configured ones. The secondary language comes before the plugin tooling
    which comes before Java. Only one language builder runs: the Java builder
    is dropped for Scala projects while the Java nature and container stay.
    Configured values follow the computed ones in their declared order.
    """
    active = [t for t, on in ((SCALA, kind.scala), (PLUGIN, kind.plugin), (JAVA, kind.java)) if on]
    suppressed = set(JAVA.builders) if kind.scala else set()

    res_natures = OrderedSet()
    res_builders = OrderedSet()
    res_containers = OrderedSet()
    for tooling in active:
        res_natures.update(tooling.natures)
        res_builders.update(b for b in tooling.builders if b not in suppressed)
        res_containers.update(tooling.containers)

    res_natures.update(n for n in natures if n not in _tooling_keys)
    res_builders.update(b for b in builders if b not in suppressed)
    res_containers.update(containers)
    return ResolvedTooling(res_natures, res_builders, res_containers)


def resolve_tooling(project: Project, context: Optional[GenerationContext] = None) -> ResolvedTooling:
    if context is None:
        context = GenerationContext()
    options = project.eclipse
    return order_tooling(context.kind(project), options.natures, options.builders, options.classpath_containers)
