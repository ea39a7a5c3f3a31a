"""
Military retirement pay estimate.
Pure calculation over the wizard's answers, decoupled from the UI.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from pay_tables import BasePayTable, get_rank_base_pay

# Per-year-of-service accrual rate, applied regardless of retirement system
MULTIPLIER = 0.02
DEFAULT_LIFE_EXPECTANCY = 85
MAX_YEARS_OF_SERVICE = 40


class CalculationError(Exception):
    """Raised when the estimate cannot be produced from otherwise eligible answers"""


@dataclass
class AnswerRecord:
    """Answers collected by the wizard"""
    branch: Optional[str] = None
    entry_date: Optional[date] = None
    rank_pay_grade: Optional[str] = None
    retirement_system: Optional[str] = None
    service_type: Optional[str] = None
    years_of_service: Optional[int] = None
    retirement_points: Optional[int] = None
    include_tsp: bool = False
    monthly_tsp_contribution: Optional[float] = None
    want_lump_sum: bool = False
    lump_sum: Optional[bool] = None
    lump_sum_percentage: Optional[int] = None  # 25 or 50, only when lump_sum
    life_expectancy: Optional[float] = DEFAULT_LIFE_EXPECTANCY


@dataclass
class CalculationResult:
    """Retirement estimate shown on the summary step"""
    monthly_pay: float
    yearly_pay: float
    percentage_of_base_pay: str
    base_pay: float
    multiplier: float = MULTIPLIER
    lump_sum: Optional[float] = None


def is_eligible(record: AnswerRecord) -> bool:
    """Only active duty members with years of service get an estimate"""
    return record.service_type == 'Active Duty' and record.years_of_service is not None


def format_percentage_of_base_pay(years_of_service: float, multiplier: float = MULTIPLIER) -> str:
    return f"{multiplier * years_of_service * 100:.1f}%"


def calculate_lump_sum(monthly_pay: float,
                       percentage: Optional[int],
                       life_expectancy: Optional[float] = None) -> float:
    """
    Estimate a lump-sum payout as a share of total lifetime retirement value.

    Args:
        monthly_pay: Monthly retirement pay
        percentage: 50 for half, anything else is treated as 25
        life_expectancy: Months remaining are life_expectancy * 12 (default 85)

    Returns:
        Lump-sum amount
    """
    months_remaining = (life_expectancy or DEFAULT_LIFE_EXPECTANCY) * 12
    total_value = monthly_pay * months_remaining
    return total_value * (0.5 if percentage == 50 else 0.25)


def calculate_retirement(record: AnswerRecord,
                         pay_table: Optional[BasePayTable] = None) -> Optional[CalculationResult]:
    """
    Calculate retirement pay for a completed answer record.

    Args:
        record: Wizard answers
        pay_table: Base-pay lookup, defaults to the built-in table

    Returns:
        CalculationResult, or None when the record is not eligible

    Raises:
        CalculationError: If the pay grade is missing or unrecognized
    """
    print(f"DEBUG [calculate_retirement]: Starting calculation with {record}")

    if not is_eligible(record):
        print(f"WARNING [calculate_retirement]: Invalid service type or years: "
              f"service_type={record.service_type}, years_of_service={record.years_of_service}")
        return None

    years_served = record.years_of_service
    base_pay = get_rank_base_pay(record.rank_pay_grade, pay_table)
    print(f"DEBUG [calculate_retirement]: multiplier={MULTIPLIER}, years={years_served}, "
          f"base_pay={base_pay}, rank_pay_grade={record.rank_pay_grade}")

    if not base_pay:
        print(f"ERROR [calculate_retirement]: Invalid base pay amount: {base_pay}")
        raise CalculationError(f"Base pay lookup failed for pay grade {record.rank_pay_grade!r}")

    monthly_pay = base_pay * MULTIPLIER * years_served
    print(f"DEBUG [calculate_retirement]: Calculated monthly retirement: {monthly_pay}")

    lump_sum = None
    if record.lump_sum:
        lump_sum = calculate_lump_sum(monthly_pay, record.lump_sum_percentage, record.life_expectancy)
        print(f"DEBUG [calculate_retirement]: Calculated {record.lump_sum_percentage}% lump sum: {lump_sum}")

    return CalculationResult(
        monthly_pay=monthly_pay,
        yearly_pay=monthly_pay * 12,
        percentage_of_base_pay=format_percentage_of_base_pay(years_served),
        base_pay=base_pay,
        lump_sum=lump_sum,
    )
