"""
Unit tests for configuration utilities.
"""
import json
import pytest
from config_utils import (
    WIZARD_STEPS, load_ui_config, get_step_metadata, get_session_defaults, resolve_pay_table
)
from pay_tables import DEFAULT_BASE_PAY, DEFAULT_PAY_TABLE
from wizard_state import STEP_ORDER


class TestLoadUIConfig:
    """Test ui_config.json loading"""

    def test_missing_file_returns_empty(self, tmp_path):
        assert load_ui_config(str(tmp_path / "ui_config.json")) == {}

    def test_valid_file(self, tmp_path):
        path = tmp_path / "ui_config.json"
        path.write_text(json.dumps({"default_life_expectancy": 80}))
        assert load_ui_config(str(path)) == {"default_life_expectancy": 80}

    def test_invalid_json_returns_empty(self, tmp_path):
        path = tmp_path / "ui_config.json"
        path.write_text("{oops")
        assert load_ui_config(str(path)) == {}

    def test_non_object_returns_empty(self, tmp_path):
        path = tmp_path / "ui_config.json"
        path.write_text(json.dumps([1, 2, 3]))
        assert load_ui_config(str(path)) == {}


class TestWizardSteps:
    """Test step metadata"""

    def test_metadata_matches_state_machine(self):
        assert [step["id"] for step in WIZARD_STEPS] == STEP_ORDER

    def test_every_step_has_title_and_description(self):
        for step in WIZARD_STEPS:
            assert step["title"]
            assert step["description"]

    def test_get_step_metadata(self):
        assert get_step_metadata("summary")["title"] == "📋 Summary"
        with pytest.raises(KeyError):
            get_step_metadata("payment")


class TestSessionDefaults:
    """Test defaults derived from config"""

    def test_defaults_without_config(self):
        assert get_session_defaults() == {'life_expectancy': 85, 'pay_table_file': None}

    def test_life_expectancy_override(self):
        assert get_session_defaults({'default_life_expectancy': 78})['life_expectancy'] == 78.0

    @pytest.mark.parametrize("bad_value", [0, -5, "old", [85]])
    def test_invalid_life_expectancy_ignored(self, bad_value):
        assert get_session_defaults({'default_life_expectancy': bad_value})['life_expectancy'] == 85

    def test_pay_table_file(self):
        defaults = get_session_defaults({'pay_table_file': 'tables/2025.json'})
        assert defaults['pay_table_file'] == 'tables/2025.json'


class TestResolvePayTable:
    """Test picking the session's pay table"""

    def test_no_file_uses_builtin(self):
        table, warning = resolve_pay_table(None)
        assert table is DEFAULT_PAY_TABLE
        assert warning is None

    def test_valid_file(self, tmp_path):
        path = tmp_path / "pay.json"
        path.write_text(json.dumps({"version": "2025", "rates": DEFAULT_BASE_PAY}))

        table, warning = resolve_pay_table(str(path))
        assert table.version == "2025"
        assert warning is None

    def test_bad_file_falls_back_with_warning(self, tmp_path):
        table, warning = resolve_pay_table(str(tmp_path / "missing.json"))
        assert table is DEFAULT_PAY_TABLE
        assert "built-in" in warning
