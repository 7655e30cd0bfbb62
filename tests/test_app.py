from fastapi.testclient import TestClient

from taskmanager.config import Settings
from taskmanager.main import create_app
from taskmanager.models import User

from conftest import PASSWORD, unique_email


def test_database_url_comes_from_settings(tmp_path):
    db_file = tmp_path / "injected.db"
    app = create_app(Settings(secret_key="injected-secret", database_url=f"sqlite:///{db_file}"))
    email = unique_email()

    # entering the client runs the lifespan, which creates the tables
    with TestClient(app) as client:
        r = client.post("/api/auth/register", json={"email": email, "password": PASSWORD})
        assert r.status_code == 201

        session = app.state.session_factory()
        try:
            assert session.query(User).filter(User.email == email).count() == 1
        finally:
            session.close()

    assert db_file.exists()
    assert str(app.state.engine.url) == f"sqlite:///{db_file}"


def test_token_service_uses_injected_secret():
    app = create_app(Settings(secret_key="injected-secret", database_url="sqlite://"))
    assert app.state.token_service.secret_key == "injected-secret"
    assert app.state.settings.database_url == "sqlite://"
