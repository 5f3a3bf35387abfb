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
In-memory model of a project tree as handed over by a build configuration
loader: source roots, output layout, dependency references and the per
project Eclipse options.
"""

from __future__ import annotations

__all__ = [
    "Layout",
    "SourceRoot",
    "ConfigOptions",
    "Project",
    "DependencyReference",
    "LocalFile",
    "SiblingProject",
    "ResolvedArtifact",
]

import copy
import os
from os.path import abspath, isdir, join
from typing import Iterable, Optional

from .support.ordered_set import OrderedSet


class Layout(object):
    """
    Conventional directories of a project, relative to its base directory.
    """
    main_java = 'src/main/java'
    main_scala = 'src/main/scala'
    main_resources = 'src/main/resources'
    test_java = 'src/test/java'
    test_scala = 'src/test/scala'
    test_resources = 'src/test/resources'
    default_output = 'target/classes'
    resources_output = 'target/resources'
    test_output = 'target/test/classes'
    test_resources_output = 'target/test/resources'

    def __init__(self, **kwArgs):
        for key in kwArgs:
            if not hasattr(Layout, key):
                raise TypeError(f'unknown layout directory: {key}')
        self.__dict__.update(kwArgs)


class SourceRoot(object):
    """
    A directory of sources or resources. `generated` marks directories
    produced by another build step (annotation processing, code generators).
    """

    def __init__(self, path: str, excludes: Iterable[str] = (), generated: bool = False):
        self.path = path
        self.excludes = OrderedSet.of(excludes)
        self.generated = generated

    def __repr__(self):
        return f'SourceRoot({self.path!r})'


class ConfigOptions(object):
    """
    Eclipse options declared on one project. A value of None means that the
    project did not set the option and inherits it from its parent.
    """
    FIELDS = ('natures', 'builders', 'classpath_containers', 'm2_repo_var')

    def __init__(self, natures=None, builders=None, classpath_containers=None, m2_repo_var: Optional[str] = None):
        self.natures = natures
        self.builders = builders
        self.classpath_containers = classpath_containers
        self.m2_repo_var = m2_repo_var

    def __setattr__(self, name, value):
        if name not in ConfigOptions.FIELDS:
            raise AttributeError(f'unknown Eclipse option: {name}')
        if value is not None and name != 'm2_repo_var':
            value = OrderedSet.of(value)
        object.__setattr__(self, name, value)

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not None


class Project(object):
    """
    A node of the project tree. Children keep a plain reference to their
    parent which is only used to look up inherited options.
    """

    def __init__(self, name: str, parent: Optional[Project] = None, base_dir: Optional[str] = None, layout: Optional[Layout] = None, plugin_descriptor: Optional[bool] = None):
        if not name or ':' in name:
            raise ValueError(f'invalid project name: {name!r}')
        self.name = name
        self.parent = parent
        self.children = []
        if base_dir is None:
            base_dir = join(parent.base_dir, name) if parent is not None else os.getcwd()
        self.base_dir = abspath(base_dir)
        if layout is None:
            layout = copy.copy(parent.layout) if parent is not None else Layout()
        self.layout = layout
        self.plugin_descriptor = plugin_descriptor
        self.compile_sources = []
        self.test_sources = []
        self.resources = []
        self.test_resources = []
        self.dependencies = []
        self.test_dependencies = []
        self.options = ConfigOptions()
        if parent is not None:
            if any(c.name == name for c in parent.children):
                raise ValueError(f'duplicate project {name} in {parent.qualified_name}')
            parent.children.append(self)

    @property
    def root(self) -> Project:
        p = self
        while p.parent is not None:
            p = p.parent
        return p

    @property
    def qualified_name(self) -> str:
        if self.parent is None:
            return self.name
        return self.parent.qualified_name + ':' + self.name

    @property
    def eclipse_name(self) -> str:
        """The name of the Eclipse project, e.g. ``myproject-foo`` for ``myproject:foo``."""
        return self.qualified_name.replace(':', '-')

    @property
    def eclipse(self):
        from .options import EclipseOptions
        return EclipseOptions(self)

    def define(self, name: str, **kwArgs) -> Project:
        return Project(name, parent=self, **kwArgs)

    def project(self, qualified_name: str) -> Project:
        """
        Looks up a project by its qualified name, starting at the root of the tree.
        """
        names = qualified_name.split(':')
        p = self.root
        if names[0] != p.name:
            raise KeyError(qualified_name)
        for name in names[1:]:
            p = next((c for c in p.children if c.name == name), None)
            if p is None:
                raise KeyError(qualified_name)
        return p

    def walk(self):
        """Yields this project and all its descendants, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def path_to(self, *parts: str) -> str:
        return join(self.base_dir, *parts)

    def _roots(self, kind: str) -> list:
        if kind not in ('compile', 'test', 'resources', 'test_resources'):
            raise ValueError(f'unknown source root kind: {kind}')
        return getattr(self, kind if kind.endswith('resources') else kind + '_sources')

    def add_sources(self, kind: str, path: str, excludes: Iterable[str] = (), generated: bool = False) -> SourceRoot:
        root = SourceRoot(path, excludes, generated)
        self._roots(kind).append(root)
        return root

    def with_conventional_sources(self) -> Project:
        """
        Declares every conventional source and resource directory that exists
        below the base directory.
        """
        layout = self.layout
        for kind, dirs in (('compile', (layout.main_java, layout.main_scala)),
                           ('resources', (layout.main_resources,)),
                           ('test', (layout.test_java, layout.test_scala)),
                           ('test_resources', (layout.test_resources,))):
            declared = {r.path for r in self._roots(kind)}
            for d in dirs:
                if d not in declared and isdir(self.path_to(d)):
                    self.add_sources(kind, d)
        return self

    def __abort_context__(self) -> str:
        return f'  project {self.qualified_name} in {self.base_dir}'

    def __str__(self):
        return self.qualified_name

    def __repr__(self):
        return f'Project({self.qualified_name!r})'


class DependencyReference(object):
    """
    A resolved dependency of a project. Produced by the dependency resolution
    of the build, only classified and rendered here.
    """

    def isLocalFile(self):
        return isinstance(self, LocalFile)

    def isSiblingProject(self):
        return isinstance(self, SiblingProject)

    def isResolvedArtifact(self):
        return isinstance(self, ResolvedArtifact)

    def _comparison_key(self):
        raise NotImplementedError()

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._comparison_key() == other._comparison_key()

    def __hash__(self):
        return hash((self.__class__.__name__, self._comparison_key()))


class LocalFile(DependencyReference):
    """
    A jar or a directory of classes on the local filesystem. `is_directory`
    is probed lazily when not supplied.
    """

    def __init__(self, path: str, is_directory: Optional[bool] = None):
        self.path = path
        self.is_directory = is_directory

    def _comparison_key(self):
        return abspath(self.path)

    def __repr__(self):
        return f'LocalFile({self.path!r})'


class SiblingProject(DependencyReference):
    """A dependency on another project of the same tree."""

    def __init__(self, target):
        self.target = target

    def resolve(self, project: Project) -> Project:
        if isinstance(self.target, Project):
            return self.target
        return project.project(self.target)

    def _comparison_key(self):
        return self.target.qualified_name if isinstance(self.target, Project) else self.target

    def __repr__(self):
        return f'SiblingProject({self._comparison_key()!r})'


class ResolvedArtifact(DependencyReference):
    """
    A repository artifact already resolved to a local jar. `source_jar_path`
    is set when a companion sources archive was found next to it.
    """

    def __init__(self, group: str, name: str, version: str, jar_path: Optional[str] = None, source_jar_path: Optional[str] = None, type: str = 'jar', classifier: Optional[str] = None): # pylint: disable=redefined-builtin
        self.group = group
        self.name = name
        self.version = version
        self.jar_path = jar_path
        self.source_jar_path = source_jar_path
        self.type = type
        self.classifier = classifier

    @staticmethod
    def from_spec(spec: str, jar_path: Optional[str] = None, source_jar_path: Optional[str] = None) -> ResolvedArtifact:
        """
        Creates an artifact from ``group:name:version``, ``group:name:type:version``
        or ``group:name:type:classifier:version``.
        """
        parts = spec.split(':')
        if len(parts) == 3:
            group, name, version = parts
            return ResolvedArtifact(group, name, version, jar_path, source_jar_path)
        if len(parts) == 4:
            group, name, type_, version = parts
            return ResolvedArtifact(group, name, version, jar_path, source_jar_path, type=type_)
        if len(parts) == 5:
            group, name, type_, classifier, version = parts
            return ResolvedArtifact(group, name, version, jar_path, source_jar_path, type=type_, classifier=classifier)
        raise ValueError(f'invalid artifact specification: {spec}')

    @property
    def spec(self) -> str:
        parts = [self.group, self.name, self.type]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ':'.join(parts)

    def _comparison_key(self):
        return self.spec

    def __str__(self):
        return self.spec

    def __repr__(self):
        return f'ResolvedArtifact({self.spec!r})'
