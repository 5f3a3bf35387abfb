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
Generation of the Eclipse ``.project`` and ``.classpath`` files of a project tree.
"""

from __future__ import annotations

__all__ = ["generate", "check", "main", "main_wrapper"]

import os
from argparse import ArgumentParser
from os.path import exists, join
from typing import Optional
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException

from .descriptor import assemble
from .errors import EclipseGenError, MissingArtifact
from .loader import default_local_repository, load_model
from .model import Project
from .natures import GenerationContext
from .support.envvars import env_var_to_bool
from .support.logging import abort, log, logv
from .support.options import set_opts
from .support.ordered_set import OrderedSet
from .support.xmldoc import canonical_xml, parse_xml, parse_xml_string, update_file

PROJECT_FILE = '.project'
CLASSPATH_FILE = '.classpath'


def _render_all(project: Project, recursive: bool) -> list:
    """
    Renders the descriptors of `project` (and its descendants if `recursive`)
    as a list of (path, content) tuples. Fails before anything is written.
    """
    context = GenerationContext()
    projects = list(project.walk()) if recursive else [project]
    files = []
    for p in projects:
        descriptors = assemble(p, context)
        files.append((join(p.base_dir, PROJECT_FILE), descriptors.project.xml()))
        files.append((join(p.base_dir, CLASSPATH_FILE), descriptors.classpath.xml()))
    return files


def generate(project: Project, recursive: bool = True) -> list:
    """
    (Re)generates the Eclipse descriptors of `project`. Files are only
    rewritten when their content changes. Returns the paths of the files
    that were created or modified.
    """
    updated = []
    for path, content in _render_all(project, recursive):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if update_file(path, content):
            updated.append(path)
    return updated


def check(project: Project, recursive: bool = True) -> list:
    """
    Gets the descriptor files of `project` that are missing or differ from
    what :func:`generate` would write. Formatting differences are ignored.
    """
    stale = []
    for path, content in _render_all(project, recursive):
        if not exists(path):
            stale.append(path)
            continue
        try:
            current = canonical_xml(parse_xml(path))
        except (ParseError, DefusedXmlException) as e:
            logv(f'cannot parse {path}: {e}')
            current = None
        if current != canonical_xml(parse_xml_string(content)):
            stale.append(path)
    return stale


def _argument_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='eclipsegen', description='(re)generate Eclipse project configurations')
    parser.add_argument('-v', action='store_true', dest='verbose', help='enable verbose output')
    parser.add_argument('-V', action='store_true', dest='very_verbose', help='enable very verbose output')
    parser.add_argument('--no-warning', action='store_false', dest='warn', help='disable warning messages')
    parser.add_argument('--quiet', action='store_true', help='disable log messages')
    parser.add_argument('--backup-modified', action='store_true', default=env_var_to_bool('ECLIPSEGEN_BACKUP_MODIFIED'), help='backup generated files if they pre-existed and are modified')
    parser.add_argument('--local-repository', help='local Maven repository used to resolve artifacts', metavar='<path>', default=default_local_repository())
    parser.add_argument('--project', help='only process the project with this qualified name', metavar='<name>')
    parser.add_argument('--no-recursive', action='store_false', dest='recursive', help='do not process nested projects')
    parser.add_argument('--check', action='store_true', help='only report descriptors that are out of date')
    parser.add_argument('model', help='JSON description of the project tree', metavar='<model.json>')
    return parser


def main(args: Optional[list] = None) -> int:
    opts = set_opts(_argument_parser().parse_args(args))

    try:
        root = load_model(opts.model, opts.local_repository)
    except OSError as e:
        return abort(f'cannot read {opts.model}: {e}')
    except EclipseGenError as e:
        return abort(str(e), context=opts.model)

    project = root
    if opts.project:
        try:
            project = root.project(opts.project)
        except KeyError:
            return abort(f'unknown project {opts.project}', context=opts.model)

    try:
        if opts.check:
            stale = check(project, opts.recursive)
            for path in stale:
                log(f'out of date: {path}')
            return 1 if stale else 0
        updated = generate(project, opts.recursive)
    except MissingArtifact as e:
        return abort(str(e), context=e.project)
    except EclipseGenError as e:
        return abort(str(e), context=project)

    processed = OrderedSet(p.base_dir for p in (project.walk() if opts.recursive else [project]))
    logv(f'{len(updated)} file(s) updated')
    log('Eclipse project generation successfully completed for:')
    log('  ' + (os.linesep + '  ').join(processed))
    return 0


def main_wrapper():
    raise SystemExit(main())
