import tempfile
from pathlib import Path

import pytest
import yaml

from async_ricochet.core.config import DEFAULT_QUADRANTS, GeneratorConfig

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_defaults():
    config = GeneratorConfig()
    assert config.board_size == 16
    assert config.quadrants == DEFAULT_QUADRANTS
    assert config.goal_attempts == 100
    assert config.max_restarts == 10


def test_shipped_config_matches_defaults():
    config = GeneratorConfig.from_yaml(REPO_ROOT / "configs" / "generator.yaml")
    assert config == GeneratorConfig()


def test_from_yaml_bare_mapping():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / "gen.yaml"
        path.write_text(yaml.safe_dump({"goal_attempts": 250, "max_restarts": 3}))
        config = GeneratorConfig.from_yaml(path)
    assert config.goal_attempts == 250
    assert config.max_restarts == 3
    assert config.multi_goal_attempts == 100


def test_quadrants_from_yaml_lists_become_tuples():
    config = GeneratorConfig.from_dict(
        {"quadrants": [["NW", 1, 6, 1, 6], ["NE", 9, 14, 1, 6], ["SW", 1, 6, 9, 14], ["SE", 9, 14, 9, 14]]}
    )
    assert config.quadrants[0] == ("NW", 1, 6, 1, 6)
    assert config.to_dict()["quadrants"][3] == ["SE", 9, 14, 9, 14]


def test_unknown_keys_rejected():
    with pytest.raises(ValueError):
        GeneratorConfig.from_dict({"goal_atempts": 5})


@pytest.mark.parametrize(
    "overrides",
    [
        {"quadrants": [("NW", 0, 6, 1, 6)] + DEFAULT_QUADRANTS[1:]},
        {"quadrants": DEFAULT_QUADRANTS[:3]},
        {"goal_attempts": 0},
        {"edge_offset_min": 5, "edge_offset_max": 3},
        {"edge_offset_max": 8},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        GeneratorConfig(**overrides)
