"""
Military pay reference data
Static base-pay table and the option lists offered by the retirement wizard.
The base-pay table is versioned reference data and can be replaced from a JSON file.
"""

import json
import os
from typing import Dict, List, Optional

BRANCHES = ['Airforce', 'Army', 'Marines', 'Navy', 'Coast Guard', 'Space Force']

PAY_GRADES = [
    'E-1', 'E-2', 'E-3', 'E-4', 'E-5', 'E-6', 'E-7', 'E-8', 'E-9',
    'O-1', 'O-2', 'O-3', 'O-4', 'O-5', 'O-6', 'O-7', 'O-8', 'O-9', 'O-10',
    'W-1', 'W-2', 'W-3', 'W-4', 'W-5'
]

RETIREMENT_SYSTEMS = ['Final Pay', 'High-3', 'BRS']

RETIREMENT_SYSTEM_DESCRIPTIONS = {
    'Final Pay': 'Legacy system',
    'High-3': 'Average of highest 3 years',
    'BRS': 'Blended Retirement System',
}

SERVICE_TYPES = ['Active Duty', 'Reserves']

LUMP_SUM_PERCENTAGES = [25, 50]

DEFAULT_PAY_TABLE_VERSION = "2024-simplified"

# Monthly base pay in dollars
DEFAULT_BASE_PAY = {
    'E-1': 1733.10,
    'E-2': 1942.50,
    'E-3': 2043.30,
    'E-4': 2263.50,
    'E-5': 2468.40,
    'E-6': 2694.30,
    'E-7': 3114.30,
    'E-8': 4480.20,
    'E-9': 5473.80,
    'O-1': 3477.30,
    'O-2': 4006.50,
    'O-3': 4636.50,
    'O-4': 5671.50,
    'O-5': 6564.30,
    'O-6': 7872.30,
    'O-7': 10083.30,
    'O-8': 12185.70,
    'O-9': 15078.60,
    'O-10': 16608.30,
    'W-1': 3213.30,
    'W-2': 3661.50,
    'W-3': 4135.50,
    'W-4': 4524.30,
    'W-5': 5429.70,
}


class PayTableError(ValueError):
    """Raised when a pay-table file cannot be used"""


class BasePayTable:
    """Read-only lookup from pay grade to monthly base pay"""

    def __init__(self, rates: Dict[str, float], version: str = DEFAULT_PAY_TABLE_VERSION):
        self._rates = dict(rates)
        self.version = version

    def get_base_pay(self, pay_grade: Optional[str]) -> float:
        """Monthly base pay for a grade, 0 when the grade is missing or unknown"""
        if not pay_grade:
            return 0.0
        return self._rates.get(pay_grade, 0.0)

    def grades(self) -> List[str]:
        return list(self._rates.keys())

    def as_dict(self) -> Dict[str, float]:
        return dict(self._rates)

    def __contains__(self, pay_grade) -> bool:
        return pay_grade in self._rates

    def __len__(self) -> int:
        return len(self._rates)


DEFAULT_PAY_TABLE = BasePayTable(DEFAULT_BASE_PAY)


def get_rank_base_pay(pay_grade: Optional[str], pay_table: Optional[BasePayTable] = None) -> float:
    """Look up monthly base pay, defaulting to the built-in table"""
    table = pay_table if pay_table is not None else DEFAULT_PAY_TABLE
    return table.get_base_pay(pay_grade)


def load_base_pay_table(filepath: str) -> BasePayTable:
    """
    Load a base-pay table from JSON.

    Expected layout:
        {"version": "2025", "rates": {"E-1": 1865.70, ...}}

    Args:
        filepath: Path to the JSON file

    Returns:
        BasePayTable with the file's rates

    Raises:
        PayTableError: If the file is missing, unreadable, or incomplete
    """
    print(f"DEBUG [load_base_pay_table]: Loading pay table from {filepath}")
    if not os.path.exists(filepath):
        raise PayTableError(f"Pay table file not found: {filepath}")

    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise PayTableError(f"Invalid JSON in pay table file: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('rates'), dict):
        raise PayTableError("Pay table file must contain a 'rates' object")

    rates = {}
    for grade in PAY_GRADES:
        if grade not in data['rates']:
            raise PayTableError(f"Pay table is missing grade {grade}")
        try:
            amount = float(data['rates'][grade])
        except (TypeError, ValueError) as e:
            raise PayTableError(f"Base pay for {grade} is not a number") from e
        if amount <= 0:
            raise PayTableError(f"Base pay for {grade} must be positive")
        rates[grade] = amount

    unknown = set(data['rates']) - set(PAY_GRADES)
    if unknown:
        print(f"WARNING [load_base_pay_table]: Ignoring unknown grades {sorted(unknown)}")

    version = str(data.get('version', 'custom'))
    print(f"DEBUG [load_base_pay_table]: Loaded {len(rates)} grades, version {version}")
    return BasePayTable(rates, version=version)
