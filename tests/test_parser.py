import pytest

from hamilton.core.model import Difficulty
from hamilton.io.parser import DEFAULT_SOLVE_STEPS, load_config


def test_load_config_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "params:\n"
        "  width: 9\n"
        "  height: 7\n"
        "  pattern: ring\n"
        "  difficulty: hard\n"
        "  diagonal: true\n"
        "seed: 42\n"
        "count: 3\n"
        "max_attempts: 50\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert (config.params.w, config.params.h) == (9, 7)
    assert config.params.pattern == "ring"
    assert config.params.difficulty is Difficulty.HARD
    assert config.params.diagonal
    assert config.seed == "42"
    assert config.count == 3
    assert config.max_attempts == 50
    assert config.solve_steps_limit == DEFAULT_SOLVE_STEPS


def test_load_config_params_string(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("params: 6x5kpbdh\n", encoding="utf-8")
    config = load_config(path)
    assert (config.params.w, config.params.h) == (6, 5)
    assert config.params.keep_ends
    assert config.params.pattern == "border"
    assert config.params.difficulty is Difficulty.HARD
    assert config.seed is None
    assert config.max_attempts is None


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    config = load_config(path)
    assert (config.params.w, config.params.h) == (7, 7)
    assert config.params.pattern == "rot2"
    assert config.count == 1


def test_load_config_rejects_bad_params(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("params:\n  size: 20\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)

    path.write_text("params:\n  difficulty: fiendish\n", encoding="utf-8")
    with pytest.raises(ValueError, match="difficulty"):
        load_config(path)
