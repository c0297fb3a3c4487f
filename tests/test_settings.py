from sellerhub.settings import Settings, _asyncpg_connect_args_from_url


def test_cors_origins_comma_separated():
    settings = Settings(_env_file=None, CORS_ORIGINS="https://a.com, http://localhost:3000")
    assert settings.cors_origins == ["https://a.com", "http://localhost:3000"]


def test_cors_origins_json_array():
    settings = Settings(_env_file=None, CORS_ORIGINS='["https://a.com","https://b.com"]')
    assert settings.cors_origins == ["https://a.com", "https://b.com"]


def test_async_database_url_rewrites_driver():
    settings = Settings(_env_file=None, database_url="postgres://u:p@db.example:5432/app")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db.example:5432/app"

    settings = Settings(_env_file=None, database_url="postgresql://u:p@db.example:5432/app")
    assert settings.async_database_url.startswith("postgresql+asyncpg://")


def test_pooler_port_disables_statement_cache():
    args = _asyncpg_connect_args_from_url("postgresql+asyncpg://u:p@pooler.example:6543/app")
    assert args["statement_cache_size"] == 0
    assert _asyncpg_connect_args_from_url("postgresql+asyncpg://u:p@localhost:5432/app") == {}


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.expiry_alert_window_days == 14
    assert settings.cloudinary_upload_preset == "products"
    assert settings.directory_cache_ttl == 60
