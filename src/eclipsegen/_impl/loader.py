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
Loads a project tree from a JSON description. Example::

    {
        "name": "myproject",
        "eclipse": {"m2_repo_var": "PROJ_REPO"},
        "projects": [
            {"name": "foo"},
            {
                "name": "bar",
                "compile": ["src/java", {"path": "target/generated/apt", "generated": true}],
                "dependencies": ["project:myproject:foo", "file:lib/some-local.jar", "com.example:library:jar:2.0"]
            }
        ]
    }

Artifact dependencies are looked up in the local Maven repository; an
artifact missing from it stays unresolved.
"""

from __future__ import annotations

__all__ = ["load_model", "model_from_dict", "default_local_repository"]

import json
from os.path import dirname, exists, expanduser, join
from typing import Optional

from .classify import artifact_repo_path
from .errors import ModelError
from .model import Layout, LocalFile, Project, ResolvedArtifact, SiblingProject
from .support.logging import logv

_project_keys = frozenset(['name', 'dir', 'layout', 'plugin', 'conventional', 'compile', 'test', 'resources',
                           'test_resources', 'dependencies', 'test_dependencies', 'eclipse', 'projects', 'version'])

_source_kinds = ('compile', 'test', 'resources', 'test_resources')


def default_local_repository() -> str:
    return join(expanduser('~'), '.m2', 'repository')


def _local_artifact(spec: str, local_repository: str, jar: Optional[str] = None, sources: Optional[str] = None) -> ResolvedArtifact:
    try:
        artifact = ResolvedArtifact.from_spec(spec)
    except ValueError as e:
        raise ModelError(str(e)) from e
    if jar is None:
        candidate = artifact_repo_path(artifact, local_repository)
        jar = candidate if exists(candidate) else None
    if sources is None and jar is not None:
        candidate = artifact_repo_path(artifact, local_repository, sources=True)
        sources = candidate if exists(candidate) else None
    artifact.jar_path = jar
    artifact.source_jar_path = sources
    return artifact


def _dependency(value, local_repository: str):
    if isinstance(value, dict):
        if 'artifact' not in value:
            raise ModelError(f'dependency object without "artifact": {value}')
        return _local_artifact(value['artifact'], local_repository, value.get('jar'), value.get('sources'))
    if not isinstance(value, str):
        raise ModelError(f'invalid dependency: {value!r}')
    if value.startswith('project:'):
        return SiblingProject(value[len('project:'):])
    if value.startswith('file:'):
        return LocalFile(value[len('file:'):])
    return _local_artifact(value, local_repository)


def _source_root(project: Project, kind: str, value) -> None:
    if isinstance(value, str):
        project.add_sources(kind, value)
    elif isinstance(value, dict) and 'path' in value:
        project.add_sources(kind, value['path'], value.get('exclude', ()), bool(value.get('generated', False)))
    else:
        raise ModelError(f'invalid {kind} source root in {project.qualified_name}: {value!r}')


def _list(project: Project, desc: dict, kind: str) -> list:
    value = desc.get(kind, [])
    if not isinstance(value, list):
        raise ModelError(f'{kind} of {project.qualified_name} must be a list')
    return value


def _set_options(project: Project, options) -> None:
    if not isinstance(options, dict):
        raise ModelError(f'eclipse options of {project.qualified_name} must be an object')
    for key, value in options.items():
        if key == 'm2_repo_var':
            valid = isinstance(value, str)
        else:
            valid = isinstance(value, str) or (isinstance(value, list) and all(isinstance(v, str) for v in value))
        if not valid:
            raise ModelError(f'{project.qualified_name}: invalid value for Eclipse option {key}: {value!r}')
        try:
            setattr(project.options, key, value)
        except (AttributeError, TypeError) as e:
            raise ModelError(f'{project.qualified_name}: {e}') from e


def _populate(project: Project, desc: dict, local_repository: str) -> None:
    unknown = set(desc) - _project_keys
    if unknown:
        raise ModelError(f'unknown attributes for {project.qualified_name}: {", ".join(sorted(unknown))}')
    for kind in _source_kinds:
        for value in _list(project, desc, kind):
            _source_root(project, kind, value)
    if desc.get('conventional', True):
        project.with_conventional_sources()
    project.dependencies = [_dependency(d, local_repository) for d in _list(project, desc, 'dependencies')]
    project.test_dependencies = [_dependency(d, local_repository) for d in _list(project, desc, 'test_dependencies')]
    _set_options(project, desc.get('eclipse', {}))
    for child_desc in _list(project, desc, 'projects'):
        child = _new_project(child_desc, project, None)
        _populate(child, child_desc, local_repository)


def _new_project(desc, parent: Optional[Project], base_dir: Optional[str]) -> Project:
    if not isinstance(desc, dict) or 'name' not in desc:
        raise ModelError(f'project description without a name: {desc!r}')
    layout = None
    if 'layout' in desc:
        try:
            layout = Layout(**desc['layout'])
        except TypeError as e:
            raise ModelError(f'{desc["name"]}: {e}') from e
    if 'dir' in desc:
        base_dir = join(parent.base_dir if parent is not None else base_dir, desc['dir'])
    try:
        return Project(desc['name'], parent=parent, base_dir=base_dir, layout=layout, plugin_descriptor=desc.get('plugin'))
    except ValueError as e:
        raise ModelError(str(e)) from e


def model_from_dict(desc: dict, base_dir: str, local_repository: Optional[str] = None) -> Project:
    """
    Creates the project tree described by `desc`, rooted in `base_dir`.
    """
    if local_repository is None:
        local_repository = default_local_repository()
    root = _new_project(desc, None, base_dir)
    _populate(root, desc, local_repository)
    return root


def load_model(path: str, local_repository: Optional[str] = None) -> Project:
    logv(f'loading project model from {path}')
    try:
        with open(path, encoding='utf-8') as fp:
            desc = json.load(fp)
    except ValueError as e:
        raise ModelError(f'{path}: {e}') from e
    return model_from_dict(desc, dirname(path) or '.', local_repository)
