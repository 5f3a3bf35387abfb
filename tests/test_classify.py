import os

import pytest

from eclipsegen import (
    LocalFile,
    MissingArtifact,
    ModelError,
    Project,
    ResolvedArtifact,
    SiblingProject,
    artifact_repo_path,
    classify,
    classify_all,
)


def _slashes(path):
    return os.path.abspath(path).replace(os.sep, "/")


def test_local_jar_is_library_with_absolute_path(root_dir, write):
    jar = write("lib/some-local.jar")
    foo = Project("foo", base_dir=root_dir)
    entry = classify(foo, LocalFile(jar), "M2_REPO")
    assert entry.kind == "library"
    assert entry.xml_kind == "lib"
    assert entry.path == _slashes(jar)
    assert entry.exclude_patterns is None


def test_relative_local_jar_is_made_absolute(root_dir, write):
    write("lib/some-local.jar")
    foo = Project("foo", base_dir=root_dir)
    entry = classify(foo, LocalFile("lib/some-local.jar"), "M2_REPO")
    assert entry.kind == "library"
    assert entry.path == _slashes(os.path.join(root_dir, "lib", "some-local.jar"))


def test_class_folder_in_project_is_source(root_dir, write):
    write("lib/some.class")
    foo = Project("foo", base_dir=root_dir)
    entry = classify(foo, LocalFile(foo.path_to("lib")), "M2_REPO")
    assert entry.kind == "source"
    assert entry.path == "lib"


def test_class_folder_outside_project_is_library(tmp_path):
    (tmp_path / "classes").mkdir()
    foo = Project("foo", base_dir=str(tmp_path / "foo"))
    entry = classify(foo, LocalFile(str(tmp_path / "classes"), is_directory=True), "M2_REPO")
    assert entry.kind == "library"
    assert entry.path == _slashes(str(tmp_path / "classes"))


def test_sibling_project(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    foo = myproject.define("foo")
    bar = myproject.define("bar")
    for target in (foo, "myproject:foo"):
        entry = classify(bar, SiblingProject(target), "M2_REPO")
        assert entry.kind == "source"
        assert entry.path == "/myproject-foo"
        assert entry.project_reference
        assert entry.attributes()["combineaccessrules"] == "false"


def test_unknown_sibling_project(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    bar = myproject.define("bar")
    with pytest.raises(ModelError):
        classify(bar, SiblingProject("myproject:nope"), "M2_REPO")


def test_artifact_without_sources(root_dir):
    foo = Project("foo", base_dir=root_dir)
    artifact = ResolvedArtifact.from_spec("com.example:library:jar:2.0", jar_path="/repo/library-2.0.jar")
    entry = classify(foo, artifact, "M2_REPO")
    assert entry.kind == "variable"
    assert entry.xml_kind == "var"
    assert entry.path == "M2_REPO/com/example/library/2.0/library-2.0.jar"
    assert entry.source_attachment_path is None
    assert "sourcepath" not in entry.attributes()


def test_artifact_with_sources(root_dir):
    foo = Project("foo", base_dir=root_dir)
    artifact = ResolvedArtifact("com.example", "library", "2.0", jar_path="/repo/library-2.0.jar",
                                source_jar_path="/repo/library-2.0-sources.jar")
    entry = classify(foo, artifact, "PROJ_REPO")
    assert entry.path == "PROJ_REPO/com/example/library/2.0/library-2.0.jar"
    assert entry.source_attachment_path == "PROJ_REPO/com/example/library/2.0/library-2.0-sources.jar"


def test_artifact_with_classifier():
    artifact = ResolvedArtifact.from_spec("org.example:native:jar:linux:1.1")
    assert artifact.classifier == "linux"
    assert artifact.spec == "org.example:native:jar:linux:1.1"
    assert artifact_repo_path(artifact, "M2_REPO") == "M2_REPO/org/example/native/1.1/native-1.1-linux.jar"
    assert ResolvedArtifact.from_spec("a.b:c:3") == ResolvedArtifact("a.b", "c", "3")


def test_invalid_artifact_spec():
    with pytest.raises(ValueError):
        ResolvedArtifact.from_spec("com.example")


def test_missing_artifact(root_dir):
    foo = Project("foo", base_dir=root_dir)
    artifact = ResolvedArtifact.from_spec("com.example:library:jar:2.0")
    with pytest.raises(MissingArtifact) as excinfo:
        classify_all(foo, [LocalFile("/lib/x.jar", is_directory=False), artifact])
    assert excinfo.value.artifact is artifact
    assert excinfo.value.project is foo
    assert "com.example:library:jar:2.0" in str(excinfo.value)


def test_classify_all_uses_resolved_repo_var(root_dir):
    foo = Project("foo", base_dir=root_dir)
    foo.options.m2_repo_var = "FOO_REPO"
    bar = foo.define("bar")
    artifact = ResolvedArtifact.from_spec("com.example:library:jar:2.0", jar_path="/repo/library-2.0.jar")
    assert [e.path for e in classify_all(bar, [artifact])] == ["FOO_REPO/com/example/library/2.0/library-2.0.jar"]


def test_class_folder_with_dotted_name_is_in_project(root_dir, write):
    write("..cache/some.class")
    foo = Project("foo", base_dir=root_dir)
    entry = classify(foo, LocalFile(foo.path_to("..cache")), "M2_REPO")
    assert entry.kind == "source"
    assert entry.path == "..cache"
