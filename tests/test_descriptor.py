import pytest
from defusedxml.ElementTree import fromstring

from eclipsegen import (
    JAVA,
    MissingArtifact,
    Project,
    ResolvedArtifact,
    SiblingProject,
    assemble,
)


def _classpath_elements(descriptors):
    return fromstring(descriptors.classpath.xml())


def _project_elements(descriptors):
    return fromstring(descriptors.project.xml())


def test_top_level_project_name(root_dir):
    assert assemble(Project("foo", base_dir=root_dir)).project.name == "foo"


def test_nested_project_name(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    foo = myproject.define("foo")
    descriptors = assemble(foo)
    assert descriptors.project.name == "myproject-foo"
    assert [e.text for e in _project_elements(descriptors).findall("name")] == ["myproject-foo"]


def test_project_depending_on_another_project(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    myproject.define("foo")
    bar = myproject.define("bar")
    bar.dependencies = [SiblingProject("myproject:foo")]
    descriptors = assemble(bar)
    paths = [n.get("path") for n in _classpath_elements(descriptors).findall("classpathentry[@kind='src']")]
    assert "/myproject-foo" in paths
    assert descriptors.project.projects == ["myproject-foo"]
    assert [n.text for n in _project_elements(descriptors).findall("projects/project")] == ["myproject-foo"]


def test_project_xml(root_dir, write):
    write("src/main/java/Main.java")
    foo = Project("foo", base_dir=root_dir).with_conventional_sources()
    foo.options.builders = "dummyBuilder"
    root = _project_elements(assemble(foo))
    assert root.tag == "projectDescription"
    assert [n.text for n in root.findall("natures/nature")] == [JAVA.natures[0]]
    assert [n.text for n in root.findall("buildSpec/buildCommand/name")] == [JAVA.builders[0], "dummyBuilder"]


def test_classpath_xml(root_dir, write):
    write("src/main/java/Main.java")
    write("src/test/java/Test.java")
    foo = Project("foo", base_dir=root_dir).with_conventional_sources()
    foo.dependencies = [ResolvedArtifact.from_spec("com.example:library:jar:2.0", jar_path="/r/library-2.0.jar",
                                                   source_jar_path="/r/library-2.0-sources.jar")]
    descriptors = assemble(foo)
    root = _classpath_elements(descriptors)
    assert root.tag == "classpath"
    for n in root.findall("classpathentry[@kind='src']"):
        excluding = n.get("excluding").split("|")
        assert "**/.svn/" in excluding
        assert "**/CVS/" in excluding
    main = root.find("classpathentry[@path='src/main/java']")
    assert main.get("output") is None
    assert root.find("classpathentry[@path='src/test/java']").get("output") == "target/test/classes"
    outputs = [n.get("path") for n in root.findall("classpathentry[@kind='output']")]
    assert outputs == ["target/classes"]
    var = root.find("classpathentry[@kind='var']")
    assert var.get("path") == "M2_REPO/com/example/library/2.0/library-2.0.jar"
    assert var.get("sourcepath") == "M2_REPO/com/example/library/2.0/library-2.0-sources.jar"
    assert [n.get("path") for n in root.findall("classpathentry[@kind='con']")] == [JAVA.containers[0]]
    assert descriptors.classpath.default_output == "target/classes"
    assert descriptors.classpath.entry("src/main/java").kind == "source"


def test_configured_containers(root_dir):
    foo = Project("foo", base_dir=root_dir)
    foo.options.classpath_containers = "myOlGoodContainer"
    assert "myOlGoodContainer" in assemble(foo).classpath.paths("container")


def test_missing_artifact_fails_assembly(root_dir, write):
    write("src/main/java/Main.java")
    foo = Project("foo", base_dir=root_dir).with_conventional_sources()
    foo.dependencies = [ResolvedArtifact.from_spec("com.example:library:jar:2.0")]
    with pytest.raises(MissingArtifact):
        assemble(foo)


def test_xml_is_deterministic(root_dir, write):
    write("src/main/java/Main.java")
    foo = Project("foo", base_dir=root_dir).with_conventional_sources()
    first = assemble(foo)
    second = assemble(foo)
    assert first.project.xml() == second.project.xml()
    assert first.classpath.xml() == second.classpath.xml()
    assert first.classpath.xml().startswith('<?xml version="1.0" encoding="UTF-8"?>')
