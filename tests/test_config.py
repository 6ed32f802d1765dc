import pytest

from lingo_engine.api.exceptions import ConfigValidationError
from lingo_engine.config import EngineConfig, load_config_from_env, validate_engine_config


def test_validate_engine_config_defaults_and_trailing_slash():
    config = validate_engine_config(api_key="k", api_url="https://engine.example/")
    assert config == EngineConfig(api_key="k", api_url="https://engine.example")


def test_validate_engine_config_rejects_missing_key():
    with pytest.raises(ConfigValidationError) as excinfo:
        validate_engine_config(api_key="")
    assert excinfo.value.details == {"missing_field": "api_key"}
    assert excinfo.value.http_status == 400


@pytest.mark.parametrize("value", [0, -3, "many"])
def test_validate_engine_config_rejects_bad_batch_size(value):
    with pytest.raises(ConfigValidationError, match="batch_size"):
        validate_engine_config(api_key="k", batch_size=value)


def test_engine_config_is_immutable():
    config = validate_engine_config(api_key="k")
    with pytest.raises(Exception):
        config.batch_size = 3


def test_load_config_from_env():
    env = {
        "LINGODOTDEV_API_KEY": "abc",
        "LINGODOTDEV_IDEAL_BATCH_ITEM_SIZE": "100",
        "LINGODOTDEV_TIMEOUT": "15",
        "LINGODOTDEV_API_URL": "",
    }
    settings = load_config_from_env(env)
    assert settings == {"api_key": "abc", "ideal_batch_item_size": "100", "timeout": 15.0}
    assert validate_engine_config(**settings).ideal_batch_item_size == 100


def test_load_config_from_env_bad_timeout():
    with pytest.raises(ConfigValidationError):
        load_config_from_env({"LINGODOTDEV_TIMEOUT": "soon"})
