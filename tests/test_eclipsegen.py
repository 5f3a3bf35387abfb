import json
import os

import pytest

from eclipsegen import MissingArtifact, ModelError, Project, ResolvedArtifact, check, generate, load_model, main, model_from_dict
from eclipsegen._impl.support.options import _opts
from eclipsegen._impl.support.xmldoc import parse_xml


def _model(tmp_path, desc):
    path = tmp_path / "eclipse.json"
    path.write_text(json.dumps(desc))
    return str(path)


def test_generate_writes_descriptors(root_dir, write):
    write("src/main/java/Main.java")
    myproject = Project("myproject", base_dir=root_dir)
    foo = myproject.define("foo").with_conventional_sources()
    written = generate(myproject)
    assert sorted(written) == sorted([
        os.path.join(root_dir, ".project"),
        os.path.join(root_dir, ".classpath"),
        os.path.join(foo.base_dir, ".project"),
        os.path.join(foo.base_dir, ".classpath"),
    ])
    assert parse_xml(os.path.join(foo.base_dir, ".project")).find("name").text == "myproject-foo"
    # nothing changed, nothing rewritten
    assert generate(myproject) == []
    assert check(myproject) == []


def test_generate_not_recursive(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    foo = myproject.define("foo")
    generate(myproject, recursive=False)
    assert os.path.exists(os.path.join(root_dir, ".project"))
    assert not os.path.exists(os.path.join(foo.base_dir, ".project"))


def test_check_reports_stale_descriptors(root_dir, write):
    write("src/main/java/Main.java")
    foo = Project("foo", base_dir=root_dir).with_conventional_sources()
    assert sorted(check(foo)) == sorted([os.path.join(root_dir, ".project"), os.path.join(root_dir, ".classpath")])
    generate(foo)
    classpath = os.path.join(root_dir, ".classpath")
    with open(classpath) as fp:
        reformatted = fp.read().replace("\t", "    ")
    with open(classpath, "w") as fp:
        fp.write(reformatted)
    assert check(foo) == []
    foo.options.classpath_containers = "myOlGoodContainer"
    assert check(foo) == [classpath]


def test_missing_artifact_writes_nothing(root_dir):
    myproject = Project("myproject", base_dir=root_dir)
    bar = myproject.define("bar")
    bar.dependencies = [ResolvedArtifact.from_spec("com.example:library:jar:2.0")]
    with pytest.raises(MissingArtifact):
        generate(myproject)
    assert not os.path.exists(os.path.join(root_dir, ".project"))
    assert not os.path.exists(os.path.join(bar.base_dir, ".classpath"))


def test_load_model(tmp_path, write):
    write("bar/src/main/java/Main.java")
    write("bar/lib/some-local.jar")
    write("repo/com/example/library/2.0/library-2.0.jar")
    write("repo/com/example/library/2.0/library-2.0-sources.jar")
    model = _model(tmp_path, {
        "name": "myproject",
        "eclipse": {"m2_repo_var": "PROJ_REPO"},
        "projects": [
            {"name": "foo", "plugin": True},
            {
                "name": "bar",
                "compile": [{"path": "target/generated/apt", "generated": True, "exclude": ["**/*.txt"]}],
                "dependencies": ["project:myproject:foo", "file:lib/some-local.jar", "com.example:library:jar:2.0"],
                "test_dependencies": [{"artifact": "org.example:other:jar:1.0", "jar": "/elsewhere/other-1.0.jar"}],
            },
        ],
    })
    root = load_model(model, str(tmp_path / "repo"))
    assert root.base_dir == str(tmp_path)
    foo = root.project("myproject:foo")
    bar = root.project("myproject:bar")
    assert foo.plugin_descriptor is True
    assert [r.path for r in bar.compile_sources] == ["target/generated/apt", "src/main/java"]
    assert bar.compile_sources[0].generated
    assert bar.eclipse.m2_repo_var == "PROJ_REPO"
    library = bar.dependencies[2]
    assert library.jar_path == str(tmp_path / "repo/com/example/library/2.0/library-2.0.jar")
    assert library.source_jar_path is not None
    assert bar.test_dependencies[0].jar_path == "/elsewhere/other-1.0.jar"
    assert bar.test_dependencies[0].source_jar_path is None


def test_model_errors(tmp_path):
    with pytest.raises(ModelError):
        model_from_dict({"projects": []}, str(tmp_path))
    with pytest.raises(ModelError):
        model_from_dict({"name": "foo", "sources": []}, str(tmp_path))
    with pytest.raises(ModelError):
        model_from_dict({"name": "foo", "dependencies": ["com.example"]}, str(tmp_path))
    with pytest.raises(ModelError):
        model_from_dict({"name": "foo", "eclipse": {"m2repo": "X"}}, str(tmp_path))
    with pytest.raises(ModelError):
        model_from_dict({"name": "foo", "layout": {"classes": "bin"}}, str(tmp_path))
    with pytest.raises(ModelError):
        model_from_dict({"name": "foo", "projects": [{"name": "a"}, {"name": "a"}]}, str(tmp_path))
    for kind in ("compile", "test", "resources", "test_resources", "dependencies", "test_dependencies", "projects"):
        with pytest.raises(ModelError) as excinfo:
            model_from_dict({"name": "foo", "conventional": False, kind: "src/java"}, str(tmp_path))
        assert str(excinfo.value) == f"{kind} of foo must be a list"
    for options in (["scala"], "scala", {"natures": 5}, {"builders": [1]}, {"m2_repo_var": ["A"]}):
        with pytest.raises(ModelError):
            model_from_dict({"name": "foo", "eclipse": options}, str(tmp_path))


def test_main(tmp_path, write, capsys):
    write("foo/src/main/java/Main.java")
    model = _model(tmp_path, {"name": "myproject", "projects": [{"name": "foo"}]})
    assert main([model, "--local-repository", str(tmp_path / "repo")]) == 0
    assert "Eclipse project generation successfully completed" in capsys.readouterr().out
    classpath = parse_xml(str(tmp_path / "foo" / ".classpath"))
    assert [n.get("path") for n in classpath.findall("classpathentry[@kind='src']")] == ["src/main/java"]
    assert main([model, "--check"]) == 0


def test_main_check_out_of_date(tmp_path, capsys):
    model = _model(tmp_path, {"name": "myproject"})
    assert main(["--check", model]) == 1
    assert "out of date" in capsys.readouterr().out


def test_main_single_project(tmp_path):
    model = _model(tmp_path, {"name": "myproject", "projects": [{"name": "foo"}, {"name": "bar"}]})
    assert main(["--project", "myproject:bar", model]) == 0
    assert os.path.exists(str(tmp_path / "bar" / ".project"))
    assert not os.path.exists(str(tmp_path / "foo" / ".project"))
    assert not os.path.exists(str(tmp_path / ".project"))


def test_main_missing_artifact(tmp_path, capsys):
    model = _model(tmp_path, {"name": "myproject", "dependencies": ["com.example:library:jar:2.0"]})
    with pytest.raises(SystemExit) as excinfo:
        main([model, "--local-repository", str(tmp_path / "repo")])
    assert excinfo.value.code == 1
    assert "com.example:library:jar:2.0" in capsys.readouterr().err
    assert not os.path.exists(str(tmp_path / ".classpath"))


def test_main_unknown_project(tmp_path):
    model = _model(tmp_path, {"name": "myproject"})
    with pytest.raises(SystemExit):
        main(["--project", "myproject:nope", model])


def test_main_invalid_model(tmp_path):
    path = tmp_path / "eclipse.json"
    path.write_text("{")
    with pytest.raises(SystemExit):
        main([str(path)])


def test_main_invalid_options(tmp_path, capsys):
    model = _model(tmp_path, {"name": "myproject", "eclipse": ["scala"]})
    with pytest.raises(SystemExit) as excinfo:
        main([model])
    assert excinfo.value.code == 1
    assert "eclipse options of myproject must be an object" in capsys.readouterr().err


def test_check_reports_descriptor_with_entities(root_dir):
    foo = Project("foo", base_dir=root_dir)
    generate(foo)
    project_file = os.path.join(root_dir, ".project")
    with open(project_file, "w") as fp:
        fp.write('<?xml version="1.0"?>\n<!DOCTYPE x [<!ENTITY a "b">]>\n<projectDescription>&a;</projectDescription>\n')
    assert check(foo) == [project_file]


def test_verbose_logging(root_dir, capsys):
    foo = Project("foo", base_dir=root_dir)
    generate(foo)
    assert "created" not in capsys.readouterr().out
    _opts.verbose = True
    foo.options.builders = "dummyBuilder"
    generate(foo)
    out = capsys.readouterr().out
    assert "modified " + os.path.join(root_dir, ".project") in out


def test_backup_modified(root_dir):
    foo = Project("foo", base_dir=root_dir)
    generate(foo)
    project_file = os.path.join(root_dir, ".project")
    with open(project_file) as fp:
        before = fp.read()
    _opts.backup_modified = True
    foo.options.natures = "dummyNature"
    generate(foo)
    with open(project_file + ".orig") as fp:
        assert fp.read() == before
    assert not os.path.exists(os.path.join(root_dir, ".classpath.orig"))
