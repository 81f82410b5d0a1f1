"""
Unit tests for user_backend.core.config
"""
from user_backend.core.config import Settings


class TestSettings:
    """Tests for Settings"""

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.mongo_database_name == "test_users_db"
        assert settings.users_collection_name == "people"
        assert settings.port == 9090
        assert settings.cors_origins == ["http://localhost:3000", "http://localhost:5173"]

    def test_defaults(self, monkeypatch):
        for name in ("MONGO_URI", "MONGO_DB_NAME", "USERS_COLLECTION", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.mongo_uri == "mongodb://127.0.0.1:27017"
        assert settings.mongo_database_name == "crudoperation"
        assert settings.users_collection_name == "users"
        assert settings.port == 8080
        assert settings.cors_origins == ["*"]
