import pytest

from config import DEFAULT_API_URL, Config


def test_required_values_and_defaults(env):
    config = Config()
    assert config.HOST == "127.0.0.1"
    assert config.PORT == 8080
    assert config.API_URL == DEFAULT_API_URL
    assert config.REQUEST_TIMEOUT == 10.0
    assert config.SUGGESTION_LIMIT == 0
    assert config.LOG_LEVEL == "INFO"


def test_optional_values_are_read(env):
    env.setenv("COUNTRIES_API_URL", "http://localhost:9000/v3.1/")
    env.setenv("REQUEST_TIMEOUT", "2.5")
    env.setenv("SUGGESTION_LIMIT", "5")
    env.setenv("LOG_LEVEL", "debug")
    config = Config()
    assert config.API_URL == "http://localhost:9000/v3.1"
    assert config.REQUEST_TIMEOUT == 2.5
    assert config.SUGGESTION_LIMIT == 5
    assert config.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("key", ["HOST", "PORT"])
def test_missing_required_value(env, key):
    env.delenv(key)
    with pytest.raises(ValueError) as excinfo:
        Config()
    assert str(excinfo.value) == f"{key} environment variable is not set."


@pytest.mark.parametrize(
    "key, value",
    [
        ("PORT", "http"),
        ("REQUEST_TIMEOUT", "soon"),
        ("SUGGESTION_LIMIT", "many"),
        ("SUGGESTION_LIMIT", "-1"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values(env, key, value):
    env.setenv(key, value)
    with pytest.raises(ValueError):
        Config()


def test_get_env_value_default(env):
    env.delenv("UNSET_FOR_TEST", raising=False)
    assert Config.get_env_value("UNSET_FOR_TEST", "fallback") == "fallback"
    with pytest.raises(ValueError):
        Config.get_env_value("UNSET_FOR_TEST")
