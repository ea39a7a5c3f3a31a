"""
Unit tests for pay reference data and pay-table loading.
"""
import json
import pytest
from pay_tables import (
    BRANCHES, PAY_GRADES, RETIREMENT_SYSTEMS, RETIREMENT_SYSTEM_DESCRIPTIONS,
    DEFAULT_BASE_PAY, DEFAULT_PAY_TABLE, BasePayTable, PayTableError,
    get_rank_base_pay, load_base_pay_table
)


def write_table(tmp_path, data):
    path = tmp_path / "pay_table.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestReferenceData:
    """Test the built-in option lists and table"""

    def test_table_covers_every_grade(self):
        assert set(DEFAULT_BASE_PAY) == set(PAY_GRADES)
        assert len(PAY_GRADES) == 24
        assert all(amount > 0 for amount in DEFAULT_BASE_PAY.values())

    def test_grade_groups(self):
        assert [g for g in PAY_GRADES if g.startswith('E-')] == [f'E-{i}' for i in range(1, 10)]
        assert [g for g in PAY_GRADES if g.startswith('O-')] == [f'O-{i}' for i in range(1, 11)]
        assert [g for g in PAY_GRADES if g.startswith('W-')] == [f'W-{i}' for i in range(1, 6)]

    def test_option_lists(self):
        assert BRANCHES == ['Airforce', 'Army', 'Marines', 'Navy', 'Coast Guard', 'Space Force']
        assert set(RETIREMENT_SYSTEM_DESCRIPTIONS) == set(RETIREMENT_SYSTEMS)

    def test_lookup(self):
        assert get_rank_base_pay('E-5') == 2468.40
        assert get_rank_base_pay('O-10') == 16608.30
        assert get_rank_base_pay(None) == 0
        assert get_rank_base_pay('Z-1') == 0
        assert 'W-5' in DEFAULT_PAY_TABLE
        assert len(DEFAULT_PAY_TABLE) == 24

    def test_table_is_a_copy(self):
        rates = {'E-1': 1000.0}
        table = BasePayTable(rates)
        rates['E-1'] = 5.0
        table.as_dict()['E-1'] = 7.0

        assert table.get_base_pay('E-1') == 1000.0


class TestLoadBasePayTable:
    """Test loading a replacement table from JSON"""

    def test_load_valid_table(self, tmp_path):
        rates = {grade: amount * 1.045 for grade, amount in DEFAULT_BASE_PAY.items()}
        table = load_base_pay_table(write_table(tmp_path, {"version": "2025", "rates": rates}))

        assert table.version == "2025"
        assert table.get_base_pay('E-5') == pytest.approx(2468.40 * 1.045)
        assert sorted(table.grades()) == sorted(PAY_GRADES)

    def test_unknown_grades_ignored(self, tmp_path):
        rates = dict(DEFAULT_BASE_PAY, **{'E-10': 9999.0})
        table = load_base_pay_table(write_table(tmp_path, {"rates": rates}))

        assert 'E-10' not in table
        assert table.version == "custom"

    def test_missing_file(self, tmp_path):
        with pytest.raises(PayTableError):
            load_base_pay_table(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(PayTableError):
            load_base_pay_table(str(path))

    def test_missing_rates(self, tmp_path):
        with pytest.raises(PayTableError):
            load_base_pay_table(write_table(tmp_path, {"version": "2025"}))

    def test_missing_grade(self, tmp_path):
        rates = dict(DEFAULT_BASE_PAY)
        del rates['W-2']
        with pytest.raises(PayTableError, match="W-2"):
            load_base_pay_table(write_table(tmp_path, {"rates": rates}))

    @pytest.mark.parametrize("bad_value", [0, -100, "lots", None])
    def test_bad_amount(self, tmp_path, bad_value):
        rates = dict(DEFAULT_BASE_PAY, **{'E-3': bad_value})
        with pytest.raises(PayTableError, match="E-3"):
            load_base_pay_table(write_table(tmp_path, {"rates": rates}))
