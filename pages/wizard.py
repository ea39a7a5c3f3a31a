"""
Military Retirement Wizard - Interactive Questionnaire
A step-by-step wizard that estimates monthly retirement pay and an optional lump sum.
All navigation and answers live in one WizardSession held in st.session_state;
this page only renders the current step and forwards user actions to wizard_state.
"""

import streamlit as st
from datetime import date

import wizard_state as ws
from config_utils import WIZARD_STEPS, load_ui_config, get_session_defaults, resolve_pay_table
from io_utils import format_currency, create_summary_table, create_summary_download_json
from pay_tables import BRANCHES, PAY_GRADES, RETIREMENT_SYSTEMS, RETIREMENT_SYSTEM_DESCRIPTIONS, SERVICE_TYPES
from retirement import MAX_YEARS_OF_SERVICE
from wizard_charts import create_pay_by_years_chart, create_lump_sum_breakdown_chart


def initialize_wizard_state():
    """Create the wizard session on first load"""
    print(f"DEBUG [initialize_wizard_state]: First-time initialization...")
    config = load_ui_config()
    defaults = get_session_defaults(config)
    pay_table, warning = resolve_pay_table(defaults['pay_table_file'])
    st.session_state.pay_table_warning = warning
    st.session_state.wizard_session = ws.new_session(
        pay_table=pay_table,
        life_expectancy=defaults['life_expectancy']
    )


def apply_action(action, *args):
    """Run a wizard transition and re-render"""
    st.session_state.wizard_session = action(st.session_state.wizard_session, *args)
    st.rerun()


def create_progress_bar(session):
    step_index = session.step_index
    total_steps = len(WIZARD_STEPS)

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        st.progress((step_index + 1) / total_steps)
        st.caption(f"Step {step_index + 1} of {total_steps}: {WIZARD_STEPS[step_index]['title']}")


def create_back_button(label="← Back"):
    if st.button(label, key="wiz_back"):
        apply_action(ws.go_back)


def step_intro(session):
    st.markdown("""
    ## Simplify Your Military Retirement Planning

    Easily calculate your funds in minutes, think ahead.
    """)
    st.info("💡 Have your details ready: branch, entry date, pay grade and years of service.")

    if st.button("🚀 Start", type="primary"):
        apply_action(ws.start)


def step_branch_selection(session):
    create_back_button()
    st.markdown("### Your Branch Of Service")

    cols = st.columns(3)
    for i, branch in enumerate(BRANCHES):
        with cols[i % 3]:
            if st.button(branch, key=f"wiz_branch_{branch}", use_container_width=True):
                apply_action(ws.select_branch, branch)


def step_entry_date(session):
    create_back_button()
    st.markdown("### When did you enter the military?")

    entry_date = st.date_input(
        "Entry date",
        value=session.answers.entry_date,
        min_value=date(1950, 1, 1),
        max_value=date.today(),
        key="wiz_entry_date"
    )
    if entry_date != session.answers.entry_date:
        st.session_state.wizard_session = ws.set_entry_date(session, entry_date)

    if st.button("Continue", type="primary"):
        apply_action(ws.continue_from_entry_date)


def step_rank(session):
    create_back_button()
    st.markdown("### What is your rank/pay grade?")

    cols = st.columns(4)
    for i, rank in enumerate(PAY_GRADES):
        with cols[i % 4]:
            if st.button(rank, key=f"wiz_rank_{rank}", use_container_width=True):
                apply_action(ws.select_rank, rank)


def step_retirement_system(session):
    create_back_button()
    st.markdown("### Select your retirement system")

    for system in RETIREMENT_SYSTEMS:
        label = f"**{system}**: {RETIREMENT_SYSTEM_DESCRIPTIONS[system]}"
        if st.button(label, key=f"wiz_system_{system}", use_container_width=True):
            apply_action(ws.select_retirement_system, system)


def step_service_years(session):
    create_back_button()
    st.markdown("### Years of Service")

    st.markdown("**Service Type**")
    cols = st.columns(2)
    for i, service_type in enumerate(SERVICE_TYPES):
        with cols[i]:
            selected = session.answers.service_type == service_type
            if st.button(service_type, key=f"wiz_service_{service_type}",
                         type="primary" if selected else "secondary", use_container_width=True):
                apply_action(ws.set_service_type, service_type)

    if session.answers.service_type == 'Active Duty':
        raw_years = st.text_input(
            "Years of Service",
            value="" if session.answers.years_of_service is None else str(session.answers.years_of_service),
            help=f"Whole years, 0 to {MAX_YEARS_OF_SERVICE}",
            key="wiz_years_of_service"
        )
        session = ws.set_years_of_service(session, raw_years)
    elif session.answers.service_type == 'Reserves':
        raw_points = st.text_input(
            "Total Retirement Points",
            value="" if session.answers.retirement_points is None else str(session.answers.retirement_points),
            key="wiz_retirement_points"
        )
        session = ws.set_retirement_points(session, raw_points)
    st.session_state.wizard_session = session

    if ws.can_continue_from_service_years(session):
        if st.button("Continue", type="primary"):
            apply_action(ws.continue_from_service_years)


def step_tsp(session):
    create_back_button()
    st.markdown("### Thrift Savings Plan (TSP)")
    st.write("Would you like to include TSP calculations in your retirement planning?")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Yes", key="wiz_tsp_yes", use_container_width=True):
            apply_action(ws.set_include_tsp, True)
    with col2:
        if st.button("No", key="wiz_tsp_no", use_container_width=True):
            apply_action(ws.set_include_tsp, False)


def step_tsp_amount(session):
    create_back_button()
    st.markdown("### Monthly TSP Contribution")

    raw_amount = st.text_input(
        "Monthly contribution ($)",
        value="" if session.answers.monthly_tsp_contribution is None
        else f"{session.answers.monthly_tsp_contribution:.2f}",
        key="wiz_tsp_amount"
    )
    st.session_state.wizard_session = ws.set_tsp_contribution(session, raw_amount)

    if st.button("Continue", type="primary"):
        apply_action(ws.continue_from_tsp_amount)


def choose_lump_sum_option(action, *args):
    with st.spinner("Calculating your benefits..."):
        st.session_state.wizard_session = action(st.session_state.wizard_session, *args)
    st.rerun()


def step_lump_sum(session):
    create_back_button()
    st.markdown("### Lump Sum Option")
    st.write("Would you like to receive a portion of your retirement as a lump sum payment?")

    if st.button("No, I prefer full monthly payments", use_container_width=True):
        choose_lump_sum_option(ws.decline_lump_sum)
    if st.button("Yes, 25% lump sum", use_container_width=True):
        choose_lump_sum_option(ws.choose_lump_sum, 25)
    if st.button("Yes, 50% lump sum", use_container_width=True):
        choose_lump_sum_option(ws.choose_lump_sum, 50)


def step_summary(session):
    st.markdown("### 📋 Your Retirement Summary")
    answers = session.answers
    result = session.result

    if session.status == ws.CalculationStatus.READY and result is not None:
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Monthly Retirement Pay", format_currency(result.monthly_pay))
            st.metric("Yearly Retirement Pay", format_currency(result.yearly_pay))
            st.metric("Percentage of Base Pay", result.percentage_of_base_pay)
        with col2:
            st.metric("Years of Service", answers.years_of_service)
            st.metric("Retirement System", answers.retirement_system or "Not selected")
            if result.lump_sum is not None:
                st.metric("Lump Sum", format_currency(result.lump_sum))
                st.caption(f"{answers.lump_sum_percentage}% of total retirement value")

        st.dataframe(create_summary_table(answers, result), hide_index=True)
        st.plotly_chart(create_pay_by_years_chart(result.base_pay, answers.years_of_service))
        if result.lump_sum is not None:
            st.plotly_chart(create_lump_sum_breakdown_chart(
                result.monthly_pay, result.lump_sum, answers.life_expectancy
            ))

        pay_table_version = session.pay_table.version if session.pay_table is not None else None
        st.download_button(
            label="📥 Download Summary",
            data=create_summary_download_json(answers, result, pay_table_version),
            file_name="retirement_summary.json",
            mime="application/json",
        )
    else:
        st.error("Unable to calculate retirement benefits")
        if answers.service_type == 'Reserves':
            st.caption("Estimates based on reserve retirement points are not available yet.")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Go Back"):
            apply_action(ws.go_back)
    with col2:
        if st.button("🔄 Begin Again", type="primary"):
            apply_action(ws.reset)


STEP_RENDERERS = {
    ws.INTRO: step_intro,
    ws.BRANCH_SELECTION: step_branch_selection,
    ws.ENTRY_DATE: step_entry_date,
    ws.RANK: step_rank,
    ws.RETIREMENT_SYSTEM: step_retirement_system,
    ws.SERVICE_YEARS: step_service_years,
    ws.TSP: step_tsp,
    ws.TSP_AMOUNT: step_tsp_amount,
    ws.LUMP_SUM: step_lump_sum,
    ws.SUMMARY: step_summary,
}


if 'wizard_session' not in st.session_state:
    initialize_wizard_state()

st.markdown("""
<div style='text-align: center; padding: 1rem; background: linear-gradient(90deg, #667eea 0%, #764ba2 100%); border-radius: 10px; margin-bottom: 2rem;'>
    <h1 style='color: white; margin: 0;'>🎖️ Military Retirement Wizard</h1>
    <p style='color: white; margin: 0; opacity: 0.9;'>Estimate your retirement pay in minutes</p>
</div>
""", unsafe_allow_html=True)

if st.session_state.get('pay_table_warning'):
    st.warning(st.session_state.pay_table_warning)

current_session = st.session_state.wizard_session
create_progress_bar(current_session)
STEP_RENDERERS[current_session.step](current_session)
