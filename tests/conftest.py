import pytest


@pytest.fixture
def crew_env(monkeypatch):
    monkeypatch.setenv("TABLE_NAME", "MovieCrewTable")
    monkeypatch.setenv("REGION", "eu-west-1")


@pytest.fixture
def make_event():
    def _make(role=None, movie_id=None, name=None, method="GET"):
        path_params = {}
        if role is not None:
            path_params["role"] = role
        if movie_id is not None:
            path_params["movieId"] = movie_id
        return {
            "httpMethod": method,
            "pathParameters": path_params or None,
            "queryStringParameters": {"name": name} if name is not None else None,
        }

    return _make
