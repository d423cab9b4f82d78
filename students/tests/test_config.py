import pytest

from admissions.config import PLACEHOLDER_SECRET, ServiceConfig, load_config

ENV_KEYS = [
    'ENV', 'DEBUG', 'SECRET_KEY', 'JWT_SECRET', 'TOKEN_LIFETIME_MINUTES', 'BCRYPT_ROUNDS',
    'DATABASE_URL', 'ALLOWED_HOSTS', 'CORS_ALLOWED_ORIGINS', 'CORS_ALLOW_ALL', 'PORT',
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    config = load_config(tmp_path)
    assert config.env == 'dev'
    assert config.debug is False
    assert config.secret_key == PLACEHOLDER_SECRET
    assert config.signing_key == PLACEHOLDER_SECRET
    assert config.bcrypt_rounds == 10
    assert config.token_lifetime_minutes == 1440
    assert config.port == 3000
    assert config.allowed_hosts == ['127.0.0.1', 'localhost']


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv('JWT_SECRET', 'jwt-key')
    clean_env.setenv('SECRET_KEY', 'django-key')
    clean_env.setenv('CORS_ALLOWED_ORIGINS', 'https://a.example, https://b.example,')
    clean_env.setenv('PORT', '8080')
    config = load_config(tmp_path)
    assert config.signing_key == 'jwt-key'
    assert config.cors_allowed_origins == ['https://a.example', 'https://b.example']
    assert config.port == 8080


def test_dotenv_file_is_read(clean_env, tmp_path):
    # registers BCRYPT_ROUNDS with monkeypatch so the value loaded from .env is undone
    clean_env.setenv('BCRYPT_ROUNDS', '4')
    clean_env.delenv('BCRYPT_ROUNDS')
    (tmp_path / '.env').write_text('BCRYPT_ROUNDS=12\n')
    assert load_config(tmp_path).bcrypt_rounds == 12


def test_prod_requires_real_secret(clean_env, tmp_path):
    clean_env.setenv('ENV', 'prod')
    with pytest.raises(RuntimeError, match='SECRET_KEY'):
        load_config(tmp_path)
    clean_env.setenv('SECRET_KEY', 'a-long-random-value')
    assert load_config(tmp_path).env == 'prod'


def test_prod_rejects_debug(tmp_path):
    config = ServiceConfig(base_dir=tmp_path, env='prod', debug=True, secret_key='x')
    with pytest.raises(RuntimeError, match='DEBUG'):
        config.validate()
