from config import Settings


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings().cors_origins == ["http://localhost:5173", "http://localhost:3000"]


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.com, http://b.com,")
    assert Settings().cors_origins == ["http://a.com", "http://b.com"]


def test_cors_origins_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.com", "http://b.com"]')
    assert Settings().cors_origins == ["http://a.com", "http://b.com"]


def test_scoring_settings_from_env(monkeypatch):
    monkeypatch.setenv("MINIMUM_MATCH_SCORE", "55")
    monkeypatch.setenv("ALLOW_PARTIAL_ASSESSMENT", "true")
    cfg = Settings()
    assert cfg.minimum_match_score == 55
    assert cfg.allow_partial_assessment is True
