import pytest
import yaml

from shapesort.config import SorterConfig, load_config


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.yaml", environ={})
    assert config == SorterConfig()
    assert config.checkpoint_interval == 1000
    assert config.log_level == "INFO"


def test_yaml_and_env_overrides(tmp_path):
    path = tmp_path / "shapesort.yaml"
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump({"checkpoint_interval": 10, "log_level": "debug", "default_algorithm": "q"}, f)

    config = load_config(path, environ={"SHAPESORT_CHECKPOINT_INTERVAL": "25"})

    assert config.checkpoint_interval == 25
    assert config.log_level == "DEBUG"
    assert config.default_algorithm == "q"


def test_env_from_process(tmp_path, monkeypatch):
    monkeypatch.setenv("SHAPESORT_RESULTS_DIR", str(tmp_path / "results"))
    config = load_config(tmp_path / "missing.yaml")
    assert config.results_dir == str(tmp_path / "results")


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "shapesort.yaml"
    path.write_text("bogus: 1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="bogus"):
        load_config(path, environ={})


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "shapesort.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path, environ={})


@pytest.mark.parametrize("kwargs", [{"checkpoint_interval": 0}, {"log_level": "LOUD"}])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SorterConfig(**kwargs)


def test_to_dict_round_trip():
    config = SorterConfig(checkpoint_interval=5)
    assert SorterConfig(**config.to_dict()) == config


def test_malformed_yaml_rejected(tmp_path):
    path = tmp_path / "shapesort.yaml"
    path.write_text("checkpoint_interval: [1, 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_config(path, environ={})
