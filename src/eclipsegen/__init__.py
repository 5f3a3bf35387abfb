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
The eclipsegen package.

Public entry points are re-exported from ``eclipsegen._impl``.

DO NOT WRITE IMPLEMENTATION CODE HERE.
"""

from ._impl.model import (
    Layout,
    SourceRoot,
    ConfigOptions,
    Project,
    DependencyReference,
    LocalFile,
    SiblingProject,
    ResolvedArtifact,
)
from ._impl.errors import EclipseGenError, ModelError, ClasspathError, MissingArtifact
from ._impl.options import resolve, EclipseOptions
from ._impl.entries import ClasspathEntry, VCS_EXCLUDES
from ._impl.classify import classify, classify_all, artifact_repo_path
from ._impl.classpath import ClasspathBuilder, build_classpath
from ._impl.natures import (
    EclipseTooling,
    JAVA,
    SCALA,
    PLUGIN,
    ProjectKind,
    ResolvedTooling,
    GenerationContext,
    detect_kind,
    order_tooling,
    resolve_tooling,
)
from ._impl.descriptor import ProjectDescriptor, ClasspathDescriptor, EclipseDescriptors, assemble
from ._impl.loader import load_model, model_from_dict
from ._impl.eclipsegen import generate, check, main
from ._impl.support.ordered_set import OrderedSet

__all__ = [
    "Layout",
    "SourceRoot",
    "ConfigOptions",
    "Project",
    "DependencyReference",
    "LocalFile",
    "SiblingProject",
    "ResolvedArtifact",
    "EclipseGenError",
    "ModelError",
    "ClasspathError",
    "MissingArtifact",
    "resolve",
    "EclipseOptions",
    "ClasspathEntry",
    "VCS_EXCLUDES",
    "classify",
    "classify_all",
    "artifact_repo_path",
    "ClasspathBuilder",
    "build_classpath",
    "EclipseTooling",
    "JAVA",
    "SCALA",
    "PLUGIN",
    "ProjectKind",
    "ResolvedTooling",
    "GenerationContext",
    "detect_kind",
    "order_tooling",
    "resolve_tooling",
    "ProjectDescriptor",
    "ClasspathDescriptor",
    "EclipseDescriptors",
    "assemble",
    "load_model",
    "model_from_dict",
    "generate",
    "check",
    "main",
    "OrderedSet",
]
