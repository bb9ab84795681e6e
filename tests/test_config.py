import logging

import pytest
import yaml

from pairwise_alignment.config.config_loader import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    get_config,
    merge_config,
    reload_config
)
from pairwise_alignment.diagnostics.validation import validate_configuration
from pairwise_alignment.pipeline.main_pipeline import load_config, setup_logging


def test_packaged_config_matches_defaults():
    """The shipped YAML and the in-code defaults describe the same settings."""
    with open(DEFAULT_CONFIG_PATH) as f:
        packaged = yaml.safe_load(f)
    assert packaged == DEFAULT_CONFIG


def test_load_config_default():
    config = load_config()
    assert config['alignment']['mode'] == 'global'
    assert config['scoring']['matrix'] == 'BLOSUM62'
    assert config['_source'].endswith('default_config.yaml')


def test_load_config_fills_missing_sections(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("alignment:\n  mode: local\n")
    config = load_config(str(path))
    assert config['alignment']['mode'] == 'local'
    assert config['alignment']['alphabet'] == 'protein'
    assert config['scoring']['gap_open'] == -10


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))

    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_merge_config_is_one_level_deep():
    merged = merge_config(DEFAULT_CONFIG, {'scoring': {'gap_open': -4}, 'input': {'seq1': 'AC'}})
    assert merged['scoring']['gap_open'] == -4
    assert merged['scoring']['gap_extend'] == -1
    assert merged['input'] == {'seq1': 'AC'}
    # The defaults themselves are untouched
    assert DEFAULT_CONFIG['scoring']['gap_open'] == -10
    assert 'input' not in DEFAULT_CONFIG


def test_config_loader(tmp_path):
    loader = ConfigLoader(tmp_path / "missing.yaml")
    assert loader.get_alignment_params()['alphabet'] == 'protein'
    assert loader.get_io_params()['line_width'] == 50

    path = tmp_path / "custom.yaml"
    path.write_text("scoring:\n  matrix: PAM160\n  gap_model: linear\n")
    loader = ConfigLoader(path)
    assert loader.get_scoring_params()['matrix'] == 'PAM160'
    assert loader.get_scoring_params()['gap_open'] == -10
    assert loader.get_debug_params()['log_level'] == 'INFO'
    assert loader.get_logging_params()['log_dir'] is None


def test_shared_loader_reload(tmp_path):
    assert get_config().get_scoring_params()['matrix'] == 'BLOSUM62'

    path = tmp_path / "custom.yaml"
    path.write_text("alignment:\n  alphabet: nucleotide\n")
    loader = reload_config(str(path))
    assert loader is get_config()
    assert get_config().get_alignment_params()['alphabet'] == 'nucleotide'

    reload_config(str(DEFAULT_CONFIG_PATH))
    assert get_config().get_alignment_params()['alphabet'] == 'protein'


def test_load_config_updates_shared_loader(tmp_path):
    """The pipeline loads its configuration through the shared loader."""
    path = tmp_path / "pam.yaml"
    path.write_text("scoring:\n  matrix: PAM160\n")
    config = load_config(str(path))
    assert get_config().config_path == path
    assert get_config().get_scoring_params()['matrix'] == 'PAM160'

    # The returned dictionary is a copy
    config['scoring']['matrix'] = 'BLOSUM45'
    assert get_config().get_scoring_params()['matrix'] == 'PAM160'

    load_config()
    assert get_config().get_scoring_params()['matrix'] == 'BLOSUM62'


def test_validate_configuration_accepts_defaults():
    ok, errors = validate_configuration(load_config())
    assert ok, errors


@pytest.mark.parametrize("overrides, fragment", [
    ({'alignment': {'mode': 'semi-global'}}, "alignment mode"),
    ({'alignment': {'alphabet': 'rna'}}, "alphabet"),
    ({'scoring': {'matrix': 'BLOSUM80'}}, "substitution matrix"),
    ({'scoring': {'gap_model': 'convex'}}, "gap model"),
    ({'scoring': {'gap_open': 5}}, "gap_open"),
    ({'scoring': {'gap_extend': -0.5}}, "gap_extend"),
    ({'io': {'line_width': 0}}, "line_width"),
])
def test_validate_configuration_errors(overrides, fragment):
    ok, errors = validate_configuration(merge_config(DEFAULT_CONFIG, overrides))
    assert not ok
    assert any(fragment in e for e in errors), errors


def test_validate_configuration_missing_section():
    ok, errors = validate_configuration({'alignment': {}})
    assert not ok
    assert "Missing configuration section: scoring" in errors


def test_setup_logging(tmp_path):
    config = merge_config(DEFAULT_CONFIG, {
        'debug': {'log_level': 'DEBUG'},
        'logging': {'log_dir': str(tmp_path / "logs")},
    })
    logger = setup_logging(config)
    assert logger.name == 'pairwise_alignment'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "logs" / "alignment.log").read_text()

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    logger = setup_logging(DEFAULT_CONFIG)
    assert file_handlers[0].stream is None
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
