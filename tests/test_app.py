"""Tests for app wiring: backend selection, error mapping, static files."""

from fastapi.testclient import TestClient

from matchlog.api.app import create_app
from matchlog.config import Settings
from matchlog.errors import StorageError
from matchlog.storage import FileMatchStore, MatchStore, SqlMatchStore, build_store


class BrokenStore(MatchStore):
    """Store whose reads always fail."""

    label = "broken"

    def init(self):
        pass

    def list_matches(self):
        raise StorageError("disk on fire at /secret/path")

    def append(self, match):
        raise RuntimeError("unexpected")

    def delete_by_id(self, match_id):
        return False

    def replace_all(self, matches):
        pass


class TestBuildStore:
    """Backend is chosen from settings."""

    def test_file_backend_without_database_url(self, tmp_path):
        store = build_store(Settings(data_dir=tmp_path, database_url=None))
        assert isinstance(store, FileMatchStore)
        assert store.path == tmp_path / "matches.json"

    def test_sql_backend_with_database_url(self, tmp_path):
        store = build_store(Settings(database_url=f"sqlite:///{tmp_path / 'm.db'}"))
        assert isinstance(store, SqlMatchStore)


class TestCreateApp:
    """App factory prepares storage before serving."""

    def test_file_store_created_on_startup(self, settings):
        create_app(settings)
        assert settings.data_file.exists()

    def test_sqlite_database_created_on_startup(self, tmp_path):
        db_path = tmp_path / "matches.db"
        settings = Settings(database_url=f"sqlite:///{db_path}", public_dir=tmp_path / "none")
        client = TestClient(create_app(settings))

        assert client.post("/api/matches", json={"date": "2024-01-01", "result": "win"}).status_code == 201
        assert db_path.exists()

    def test_health_reports_backend(self, settings, file_store):
        client = TestClient(create_app(settings, store=file_store))
        assert client.get("/health").json() == {"status": "ok", "storage": "file"}


class TestErrorMapping:
    """Unhandled failures become opaque 500s."""

    def test_storage_error_is_500_without_detail(self, settings, caplog):
        client = TestClient(create_app(settings, store=BrokenStore()))

        response = client.get("/api/matches")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "secret" not in response.text
        assert "Storage failure" in caplog.text

    def test_unexpected_error_is_500_logged_once(self, settings, caplog):
        # Default TestClient re-raises anything that escapes to ServerErrorMiddleware
        client = TestClient(create_app(settings, store=BrokenStore()))

        response = client.post("/api/matches", json={"date": "2024-01-01", "result": "win"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

        errors = [r for r in caplog.records if r.levelname == "ERROR" and r.name.startswith("matchlog")]
        assert len(errors) == 1
        assert errors[0].exc_info is not None


class TestStaticFiles:
    """Bundled front-end is served when present."""

    def test_serves_index_when_public_dir_exists(self, settings, file_store):
        settings.public_dir.mkdir(parents=True)
        (settings.public_dir / "index.html").write_text("<h1>tracker</h1>")
        client = TestClient(create_app(settings, store=file_store))

        assert "tracker" in client.get("/").text
        assert client.get("/api/matches").json() == []

    def test_no_mount_without_public_dir(self, settings, file_store):
        client = TestClient(create_app(settings, store=file_store))
        assert client.get("/").status_code == 404
