import pytest


@pytest.fixture(autouse=True)
def run_from_project_root(request, monkeypatch):
    # example programs are opened relative to the project root
    monkeypatch.chdir(request.config.rootpath)
