import pytest

from eclipsegen._impl.support.options import _opts


@pytest.fixture(autouse=True)
def _reset_opts():
    saved = dict(vars(_opts))
    yield
    _opts.__dict__.clear()
    _opts.__dict__.update(saved)


@pytest.fixture(autouse=True)
def _no_repo_var_override(monkeypatch):
    monkeypatch.delenv("ECLIPSEGEN_M2_REPO_VAR", raising=False)


@pytest.fixture
def write(tmp_path):
    """Creates a file (and its parent directories) below the test directory."""
    def _write(name, content=""):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return str(path)
    return _write


@pytest.fixture
def root_dir(tmp_path):
    return str(tmp_path)
