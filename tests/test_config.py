import pytest
import yaml

from regression_analysis.config import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config


@pytest.fixture(scope="module")
def shipped_config():
    with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def test_shipped_config_matches_defaults(shipped_config):
    assert shipped_config == DEFAULT_CONFIG


def test_top_level_keys(shipped_config):
    for key in ["data", "report", "output", "logging"]:
        assert key in shipped_config, f"Missing key: {key}"


def test_columns_distinct(shipped_config):
    data = shipped_config["data"]
    assert data["x_column"] != data["y_column"], "x and y must read different columns"


def test_no_path_returns_copy_of_defaults():
    config = load_config()
    assert config == DEFAULT_CONFIG
    config["data"]["x_column"] = "changed"
    assert DEFAULT_CONFIG["data"]["x_column"] == "x"


def test_partial_override_merges(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("data:\n  y_column: target\nreport:\n  float_format: '.3f'\n")
    config = load_config(path)
    assert config["data"] == {"x_column": "x", "y_column": "target"}
    assert config["report"]["float_format"] == ".3f"
    assert config["report"]["percent_score"] is True


def test_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("data:\n")
    assert load_config(path)["data"] == DEFAULT_CONFIG["data"]


def test_unknown_section_rejected(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("solver:\n  tol: 1e-6\n")
    with pytest.raises(ValueError, match="Unknown config sections"):
        load_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_log_level_normalized(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("logging:\n  level: debug\n")
    assert load_config(path)["logging"]["level"] == "DEBUG"


@pytest.mark.parametrize("body, message", [
    ("logging:\n  level: loud\n", "Invalid logging.level"),
    ("logging:\n  level: null\n", "Invalid logging.level"),
    ("logging:\n  level: 10\n", "Invalid logging.level"),
    ("report:\n  float_format: 'zz'\n", "Invalid report.float_format"),
    ("report:\n  float_format: 3\n", "report.float_format must be a string"),
    ("report:\n  percent_score: maybe\n", "percent_score"),
    ("data: 5\n", "must be a mapping"),
])
def test_invalid_values_rejected(tmp_path, body, message):
    path = tmp_path / "custom.yaml"
    path.write_text(body)
    with pytest.raises(ValueError, match=message):
        load_config(path)
