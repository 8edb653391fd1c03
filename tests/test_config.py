import pytest

from nonogram.core.config import DEFAULT_MAX_TRIALS, SearchConfig
from nonogram.errors import ConfigError


def test_defaults():
    config = SearchConfig()
    assert config.max_recursion_level == 1
    assert config.max_trials == DEFAULT_MAX_TRIALS == 100
    assert config.debug is False
    assert config.checkpoint is None


def test_from_options():
    config = SearchConfig.from_options({"recursion_depth": 3, "max_trials": 10, "debug": True, "colour": "red"})
    assert config == SearchConfig(max_recursion_level=3, max_trials=10, debug=True)
    assert SearchConfig.from_options(None) == SearchConfig()


@pytest.mark.parametrize(
    "options",
    [
        {"recursion_depth": -1},
        {"recursion_depth": "2"},
        {"recursion_depth": True},
        {"max_trials": 0},
        {"debug": "yes"},
    ],
)
def test_invalid_options_raise(options):
    with pytest.raises(ConfigError):
        SearchConfig.from_options(options)


def test_replace_skips_none():
    config = SearchConfig(max_recursion_level=2)
    assert config.replace(max_recursion_level=None, max_trials=5) == SearchConfig(max_recursion_level=2, max_trials=5)
