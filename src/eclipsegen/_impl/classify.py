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
Classification of resolved dependency references into classpath entries.
"""

from __future__ import annotations

__all__ = ["classify", "classify_all", "artifact_repo_path", "referenced_projects"]

from os.path import isdir
from typing import Iterable, Optional

from .entries import ClasspathEntry, absolute_path, eclipse_path, is_inside
from .errors import MissingArtifact, ModelError
from .model import DependencyReference, LocalFile, Project, ResolvedArtifact
from .support.logging import abort, logvv


def artifact_repo_path(artifact: ResolvedArtifact, m2_repo_var: str, sources: bool = False) -> str:
    """
    Gets the path of `artifact` in a Maven 2 repository layout, prefixed with
    the classpath variable `m2_repo_var`, e.g.
    ``M2_REPO/com/example/library/2.0/library-2.0.jar``.
    """
    file_name = f'{artifact.name}-{artifact.version}'
    if artifact.classifier:
        file_name += '-' + artifact.classifier
    if sources:
        file_name += '-sources'
    file_name += '.' + artifact.type
    return '/'.join([m2_repo_var] + artifact.group.split('.') + [artifact.name, artifact.version, file_name])


def _classify_local_file(project: Project, dep: LocalFile) -> ClasspathEntry:
    is_directory = dep.is_directory
    if is_directory is None:
        is_directory = isdir(project.path_to(dep.path))
    path = project.path_to(dep.path)
    if is_directory and is_inside(project, path):
        # classes generated by another build step of this project
        return ClasspathEntry('source', eclipse_path(project, path))
    return ClasspathEntry('library', absolute_path(path))


def classify(project: Project, dep: DependencyReference, m2_repo_var: str) -> ClasspathEntry:
    """
    Converts the dependency `dep` of `project` into a classpath entry.

    :raises MissingArtifact: if `dep` is an artifact without a local jar
    """
    if dep.isLocalFile():
        entry = _classify_local_file(project, dep)
    elif dep.isSiblingProject():
        try:
            target = dep.resolve(project)
        except KeyError:
            raise ModelError(f'unknown project {dep.target} in dependencies of {project.qualified_name}')
        entry = ClasspathEntry('source', '/' + target.eclipse_name, project_reference=True)
    elif dep.isResolvedArtifact():
        if not dep.jar_path:
            raise MissingArtifact(dep, project)
        source_path = artifact_repo_path(dep, m2_repo_var, sources=True) if dep.source_jar_path else None
        entry = ClasspathEntry('variable', artifact_repo_path(dep, m2_repo_var), source_attachment_path=source_path)
    else:
        return abort('unexpected dependency: ' + repr(dep), context=project)
    logvv(f'{project.qualified_name}: {dep!r} -> {entry.xml_kind} {entry.path}')
    return entry


def classify_all(project: Project, deps: Iterable[DependencyReference], m2_repo_var: Optional[str] = None) -> list:
    if m2_repo_var is None:
        m2_repo_var = project.eclipse.m2_repo_var
    return [classify(project, dep, m2_repo_var) for dep in deps]


def referenced_projects(project: Project, deps: Iterable[DependencyReference]) -> list:
    """Gets the Eclipse names of the sibling projects among `deps`, without duplicates."""
    names = []
    for dep in deps:
        if dep.isSiblingProject():
            name = dep.resolve(project).eclipse_name
            if name not in names:
                names.append(name)
    return names
