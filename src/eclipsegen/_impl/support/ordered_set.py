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

__all__ = ["OrderedSet"]

from collections import OrderedDict
from collections.abc import MutableSet
from typing import Iterable, Optional


class OrderedSet(MutableSet):
    """
    A set that remembers insertion order. Adding a value that is already
    present keeps its original position.
    """

    def __init__(self, values: Optional[Iterable[str]] = None):
        self._items = OrderedDict()
        if values is not None:
            self.update(values)

    @staticmethod
    def of(value) -> OrderedSet:
        """
        Normalizes a single string or an iterable of strings to an OrderedSet.
        """
        if isinstance(value, OrderedSet):
            return OrderedSet(value)
        if isinstance(value, str):
            return OrderedSet([value])
        return OrderedSet(value)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return list(self._items)[index]

    def add(self, value) -> None:
        self._items.setdefault(value, None)

    def discard(self, value) -> None:
        self._items.pop(value, None)

    def update(self, values: Iterable) -> OrderedSet:
        for value in values:
            self.add(value)
        return self

    def index(self, value) -> int:
        return list(self._items).index(value)

    def __eq__(self, other):
        if isinstance(other, OrderedSet):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return MutableSet.__eq__(self, other)

    __hash__ = None

    def __repr__(self):
        return f"OrderedSet({list(self._items)!r})"
