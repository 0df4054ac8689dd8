from app.core.config import Settings, mask_secret
from app.services.student.student import StudentStore
from seed import SAMPLE_STUDENTS, seed_data


def test_defaults():
    s = Settings(_env_file=None)
    assert s.API_PREFIX == "/api"
    assert s.OPENAI_MODEL == "gpt-4o-mini"
    assert (s.LLM_TEMPERATURE, s.LLM_MAX_TOKENS) == (0.7, 2000)


def test_cors_origins_from_json_string():
    s = Settings(_env_file=None, BACKEND_CORS_ORIGINS='["http://localhost:3000"]')
    assert s.BACKEND_CORS_ORIGINS == ["http://localhost:3000"]


def test_api_prefix_is_normalized():
    assert Settings(_env_file=None, API_PREFIX="api/").API_PREFIX == "/api"


def test_mask_secret():
    assert mask_secret("") == "(not set)"
    assert mask_secret("short") == "*****"
    masked = mask_secret("sk-1234567890abcd")
    assert masked.startswith("sk-") and masked.endswith("abcd")
    assert "1234567890" not in masked


def test_seed_only_fills_empty_roster(database):
    assert seed_data(database) == len(SAMPLE_STUDENTS)
    assert seed_data(database) == 0

    with database.session() as db:
        names = [s.name for s in StudentStore(db).list()]
    assert names == sorted(s["name"] for s in SAMPLE_STUDENTS)


def test_in_memory_sqlite_shares_one_connection():
    from sqlalchemy.pool import StaticPool

    from app.core.database import build_engine_options

    s = Settings(_env_file=None)
    memory = build_engine_options("sqlite://", s)
    assert memory["poolclass"] is StaticPool
    assert memory["connect_args"] == {"check_same_thread": False}
    assert "poolclass" not in build_engine_options("sqlite:///./database.sqlite", s)
