"""
Retirement Wizard State Machine
Step sequence, answer record and transitions for the military retirement wizard.
Every operation takes a WizardSession and returns a new one, so the wizard can be
driven and tested without a Streamlit runtime.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Optional

from pay_tables import BRANCHES, PAY_GRADES, RETIREMENT_SYSTEMS, SERVICE_TYPES, LUMP_SUM_PERCENTAGES, BasePayTable
from retirement import (
    AnswerRecord, CalculationResult, CalculationError, calculate_retirement,
    DEFAULT_LIFE_EXPECTANCY, MAX_YEARS_OF_SERVICE,
)

INTRO = 'intro'
BRANCH_SELECTION = 'branch-selection'
ENTRY_DATE = 'entry-date'
RANK = 'rank'
RETIREMENT_SYSTEM = 'retirement-system'
SERVICE_YEARS = 'service-years'
TSP = 'tsp'
TSP_AMOUNT = 'tsp-amount'
LUMP_SUM = 'lump-sum'
SUMMARY = 'summary'

STEP_ORDER = [
    INTRO, BRANCH_SELECTION, ENTRY_DATE, RANK, RETIREMENT_SYSTEM,
    SERVICE_YEARS, TSP, TSP_AMOUNT, LUMP_SUM, SUMMARY
]

# Back navigation follows this table, not the path the user actually took
PREVIOUS_STEP = {
    INTRO: None,
    BRANCH_SELECTION: INTRO,
    ENTRY_DATE: BRANCH_SELECTION,
    RANK: ENTRY_DATE,
    RETIREMENT_SYSTEM: RANK,
    SERVICE_YEARS: RETIREMENT_SYSTEM,
    TSP: SERVICE_YEARS,
    TSP_AMOUNT: TSP,
    LUMP_SUM: TSP_AMOUNT,
    SUMMARY: LUMP_SUM,
}


class CalculationStatus:
    """Summary-step calculation states"""
    IDLE = "idle"
    # Only set inside the summary transition; callers always receive a finished status
    CALCULATING = "calculating"
    READY = "ready"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


class WizardStepError(Exception):
    """Raised when an action is invoked on a step it does not belong to"""


@dataclass(frozen=True)
class WizardSession:
    """Current step, answers and summary result for one user"""
    step: str = INTRO
    answers: AnswerRecord = field(default_factory=AnswerRecord)
    result: Optional[CalculationResult] = None
    status: str = CalculationStatus.IDLE
    pay_table: Optional[BasePayTable] = field(default=None, repr=False, compare=False)
    default_life_expectancy: float = field(default=DEFAULT_LIFE_EXPECTANCY, repr=False, compare=False)

    def __post_init__(self):
        if self.step not in PREVIOUS_STEP:
            raise WizardStepError(f"Unknown wizard step: {self.step}")

    @property
    def step_index(self) -> int:
        return STEP_ORDER.index(self.step)


def new_session(pay_table: Optional[BasePayTable] = None,
                life_expectancy: float = DEFAULT_LIFE_EXPECTANCY) -> WizardSession:
    """Create an empty session at the intro step"""
    return WizardSession(answers=AnswerRecord(life_expectancy=life_expectancy), pay_table=pay_table,
                         default_life_expectancy=life_expectancy)


def parse_whole_number(raw: Any) -> Optional[int]:
    """Parse a non-negative whole number from widget input, None if invalid"""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            return None
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return None
    return value if value >= 0 else None


def parse_amount(raw: Any) -> Optional[float]:
    """Parse a non-negative dollar amount from widget input, None if invalid"""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(str(raw).strip().replace(',', '').lstrip('$'))
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _require_step(session: WizardSession, expected: str, action: str) -> None:
    if session.step != expected:
        raise WizardStepError(f"{action} is only valid at '{expected}', current step is '{session.step}'")


def _require_choice(value: Any, options, label: str) -> None:
    if value not in options:
        raise ValueError(f"Unknown {label}: {value!r}")


def _run_calculation(session: WizardSession) -> WizardSession:
    """Transition action for entering the summary step"""
    session = replace(session, result=None, status=CalculationStatus.CALCULATING)
    try:
        result = calculate_retirement(session.answers, session.pay_table)
    except CalculationError as e:
        print(f"ERROR [run_calculation]: Calculation failed: {e}")
        print(f"ERROR [run_calculation]: Answers at failure: {session.answers}")
        return replace(session, status=CalculationStatus.FAILED)
    finally:
        print(f"DEBUG [run_calculation]: Calculation process completed")

    if result is None:
        return replace(session, status=CalculationStatus.UNAVAILABLE)
    return replace(session, result=result, status=CalculationStatus.READY)


def _move_to(session: WizardSession, step: str, **answer_updates) -> WizardSession:
    answers = replace(session.answers, **answer_updates) if answer_updates else session.answers
    print(f"DEBUG [move_to]: Current step: {session.step} -> {step}")
    session = replace(session, step=step, answers=answers)
    if step == SUMMARY:
        session = _run_calculation(session)
    return session


def _update_answers(session: WizardSession, **answer_updates) -> WizardSession:
    return replace(session, answers=replace(session.answers, **answer_updates))


def start(session: WizardSession) -> WizardSession:
    _require_step(session, INTRO, "start")
    return _move_to(session, BRANCH_SELECTION)


def select_branch(session: WizardSession, branch: str) -> WizardSession:
    _require_step(session, BRANCH_SELECTION, "select_branch")
    _require_choice(branch, BRANCHES, "branch")
    return _move_to(session, ENTRY_DATE, branch=branch)


def set_entry_date(session: WizardSession, entry_date: Optional[date]) -> WizardSession:
    """Record the entry date without leaving the step"""
    _require_step(session, ENTRY_DATE, "set_entry_date")
    return _update_answers(session, entry_date=entry_date)


def continue_from_entry_date(session: WizardSession) -> WizardSession:
    _require_step(session, ENTRY_DATE, "continue_from_entry_date")
    return _move_to(session, RANK)


def select_rank(session: WizardSession, rank: str) -> WizardSession:
    _require_step(session, RANK, "select_rank")
    _require_choice(rank, PAY_GRADES, "pay grade")
    return _move_to(session, RETIREMENT_SYSTEM, rank_pay_grade=rank)


def select_retirement_system(session: WizardSession, system: str) -> WizardSession:
    _require_step(session, RETIREMENT_SYSTEM, "select_retirement_system")
    _require_choice(system, RETIREMENT_SYSTEMS, "retirement system")
    return _move_to(session, SERVICE_YEARS, retirement_system=system)


def set_service_type(session: WizardSession, service_type: str) -> WizardSession:
    _require_step(session, SERVICE_YEARS, "set_service_type")
    _require_choice(service_type, SERVICE_TYPES, "service type")
    return _update_answers(session, service_type=service_type)


def set_years_of_service(session: WizardSession, raw: Any) -> WizardSession:
    """Store years of service; invalid entries leave the previous value in place"""
    _require_step(session, SERVICE_YEARS, "set_years_of_service")
    years = parse_whole_number(raw)
    if years is None or years > MAX_YEARS_OF_SERVICE:
        return session
    return _update_answers(session, years_of_service=years)


def set_retirement_points(session: WizardSession, raw: Any) -> WizardSession:
    """Store reserve retirement points; invalid entries leave the previous value in place"""
    _require_step(session, SERVICE_YEARS, "set_retirement_points")
    points = parse_whole_number(raw)
    if points is None:
        return session
    return _update_answers(session, retirement_points=points)


def can_continue_from_service_years(session: WizardSession) -> bool:
    answers = session.answers
    if answers.service_type == 'Active Duty':
        return answers.years_of_service is not None
    if answers.service_type == 'Reserves':
        return answers.retirement_points is not None
    return False


def continue_from_service_years(session: WizardSession) -> WizardSession:
    _require_step(session, SERVICE_YEARS, "continue_from_service_years")
    if not can_continue_from_service_years(session):
        raise WizardStepError("Years of service or retirement points are required before continuing")
    return _move_to(session, TSP)


def set_include_tsp(session: WizardSession, include_tsp: bool) -> WizardSession:
    _require_step(session, TSP, "set_include_tsp")
    next_step = TSP_AMOUNT if include_tsp else LUMP_SUM
    return _move_to(session, next_step, include_tsp=bool(include_tsp))


def set_tsp_contribution(session: WizardSession, raw: Any) -> WizardSession:
    _require_step(session, TSP_AMOUNT, "set_tsp_contribution")
    amount = parse_amount(raw)
    if amount is None:
        return session
    return _update_answers(session, monthly_tsp_contribution=amount)


def continue_from_tsp_amount(session: WizardSession) -> WizardSession:
    _require_step(session, TSP_AMOUNT, "continue_from_tsp_amount")
    return _move_to(session, LUMP_SUM)


def decline_lump_sum(session: WizardSession) -> WizardSession:
    _require_step(session, LUMP_SUM, "decline_lump_sum")
    return _move_to(session, SUMMARY, want_lump_sum=False, lump_sum=False, lump_sum_percentage=None)


def choose_lump_sum(session: WizardSession, percentage: int) -> WizardSession:
    _require_step(session, LUMP_SUM, "choose_lump_sum")
    _require_choice(percentage, LUMP_SUM_PERCENTAGES, "lump sum percentage")
    return _move_to(session, SUMMARY, want_lump_sum=True, lump_sum=True, lump_sum_percentage=percentage)


def go_back(session: WizardSession) -> WizardSession:
    """Step back one place in the fixed order; answers are kept"""
    previous = PREVIOUS_STEP[session.step]
    if previous is None:
        return session
    return _move_to(session, previous)


def reset(session: WizardSession) -> WizardSession:
    """Discard answers and results and return to the intro step"""
    print(f"DEBUG [reset]: Resetting wizard from step {session.step}")
    return new_session(pay_table=session.pay_table, life_expectancy=session.default_life_expectancy)
