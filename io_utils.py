"""
IO utilities for the retirement summary.
Currency formatting, summary tables and the JSON summary download.
"""
import json
import pandas as pd
from typing import Dict, Any, Optional
from dataclasses import asdict
from datetime import date, datetime

from retirement import AnswerRecord, CalculationResult


def format_currency(value: float, precision: int = 2, compact: bool = False) -> str:
    """
    Format currency values for display.

    Args:
        value: Numeric value to format
        precision: Number of decimal places
        compact: Use K/M suffixes for large values

    Returns:
        Formatted string
    """
    if compact:
        if abs(value) >= 1_000_000:
            return f"${value/1_000_000:.{precision}f}M"
        elif abs(value) >= 1_000:
            return f"${value/1_000:.{precision}f}K"
    return f"${value:,.{precision}f}"


def answers_to_dict(answers: AnswerRecord) -> Dict[str, Any]:
    """Convert an AnswerRecord to a JSON-safe dictionary"""
    data = asdict(answers)
    if isinstance(data.get('entry_date'), date):
        data['entry_date'] = data['entry_date'].isoformat()
    return data


def result_to_dict(result: Optional[CalculationResult]) -> Optional[Dict[str, Any]]:
    return asdict(result) if result is not None else None


def create_summary_table(answers: AnswerRecord, result: CalculationResult) -> pd.DataFrame:
    """Build the summary table shown on the final wizard step"""
    rows = [
        ("Monthly Retirement Pay", format_currency(result.monthly_pay)),
        ("Yearly Retirement Pay", format_currency(result.yearly_pay)),
        ("Percentage of Base Pay", result.percentage_of_base_pay),
        ("Monthly Base Pay", format_currency(result.base_pay)),
        ("Years of Service", str(answers.years_of_service)),
        ("Retirement System", answers.retirement_system or "Not selected"),
    ]
    if result.lump_sum is not None:
        rows.append((f"Lump Sum ({answers.lump_sum_percentage}% of total retirement value)",
                     format_currency(result.lump_sum)))
    if answers.include_tsp and answers.monthly_tsp_contribution is not None:
        rows.append(("Monthly TSP Contribution", format_currency(answers.monthly_tsp_contribution)))

    return pd.DataFrame(rows, columns=["Item", "Amount"])


def create_summary_download_json(answers: AnswerRecord,
                                 result: Optional[CalculationResult],
                                 pay_table_version: Optional[str] = None) -> str:
    """
    Create a JSON string of the answers and estimate for download.

    Args:
        answers: Wizard answers
        result: Calculation result, None when unavailable
        pay_table_version: Version label of the base-pay table used

    Returns:
        JSON string
    """
    export_data = {
        'metadata': {
            'created_at': datetime.now().isoformat(),
            'pay_table_version': pay_table_version,
        },
        'answers': answers_to_dict(answers),
        'results': result_to_dict(result),
    }
    return json.dumps(export_data, indent=2)
