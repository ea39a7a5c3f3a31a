#!/usr/bin/env python3
"""
Demo script showing how to drive the retirement wizard programmatically.
This walks the same steps as the Streamlit page without the UI.
"""

from datetime import date

import wizard_state as ws
from io_utils import format_currency


def main():
    print("🎖️ Military Retirement Wizard Demo")
    print("=" * 50)

    session = ws.new_session()
    session = ws.start(session)
    session = ws.select_branch(session, 'Army')
    session = ws.set_entry_date(session, date(2005, 6, 1))
    session = ws.continue_from_entry_date(session)
    session = ws.select_rank(session, 'E-7')
    session = ws.select_retirement_system(session, 'BRS')
    session = ws.set_service_type(session, 'Active Duty')
    session = ws.set_years_of_service(session, "20")
    session = ws.continue_from_service_years(session)
    session = ws.set_include_tsp(session, False)
    session = ws.choose_lump_sum(session, 25)

    print(f"\n📋 Answers: {session.answers}")
    print(f"   Step: {session.step}, status: {session.status}")

    result = session.result
    if result is None:
        print("\n❌ Unable to calculate retirement benefits")
        return

    print(f"\n💰 Results:")
    print(f"   Monthly pay: {format_currency(result.monthly_pay)}")
    print(f"   Yearly pay: {format_currency(result.yearly_pay)}")
    print(f"   Percentage of base pay: {result.percentage_of_base_pay}")
    if result.lump_sum is not None:
        print(f"   Lump sum ({session.answers.lump_sum_percentage}%): {format_currency(result.lump_sum)}")

    session = ws.go_back(session)
    print(f"\n↩️ Back to: {session.step}")
    session = ws.reset(session)
    print(f"🔄 After reset: {session.step}, answers empty: {session.answers == ws.new_session().answers}")


if __name__ == "__main__":
    main()
