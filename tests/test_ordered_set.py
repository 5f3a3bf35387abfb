from eclipsegen import OrderedSet


def test_insertion_order_and_duplicates():
    s = OrderedSet(["b", "a", "b", "c"])
    assert list(s) == ["b", "a", "c"]
    s.add("a")
    s.add("d")
    assert list(s) == ["b", "a", "c", "d"]
    assert s.index("c") == 2
    assert s[0] == "b"
    s.discard("a")
    s.discard("missing")
    assert s == ["b", "c", "d"]


def test_of():
    assert OrderedSet.of("single") == ["single"]
    assert OrderedSet.of(("x", "y", "x")) == ["x", "y"]
    original = OrderedSet(["x"])
    copy = OrderedSet.of(original)
    copy.add("y")
    assert original == ["x"]


def test_set_comparisons():
    s = OrderedSet(["**/.svn/", "**/CVS/", "**/*.java"])
    assert {"**/.svn/", "**/CVS/"} <= s
    assert s == {"**/CVS/", "**/.svn/", "**/*.java"}
    assert OrderedSet(["a", "b"]) != OrderedSet(["b", "a"])
