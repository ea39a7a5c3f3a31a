"""
Military Retirement Estimator - Main Application Entry Point

A Streamlit multipage application that walks a service member through a short
questionnaire and estimates:
- Monthly and yearly retirement pay
- Percentage of base pay earned through years of service
- An optional 25% or 50% lump-sum payout
"""

import streamlit as st


def start_page():
    """Start page content"""
    st.title("🎖️ Military Retirement Estimator")

    st.markdown("""
    ### Simplify Your Military Retirement Planning

    Answer a few questions about your service and get an estimate of your retirement pay.
    """)

    col1, col2 = st.columns(2)

    with col1:
        st.markdown("### 🧙‍♂️ Retirement Wizard")
        st.markdown("""
        📋 **Covers:**
        - Branch, entry date and pay grade
        - Retirement system and years of service
        - Thrift Savings Plan participation
        - Lump-sum options
        """)

        if st.button("🚀 Start Retirement Wizard", type="primary"):
            st.switch_page("pages/wizard.py")

    with col2:
        st.info("💡 **Tip**: Estimates use a simplified 2% per year multiplier on base pay.")
        st.info("🔒 **Privacy**: Nothing you enter is saved once you close the page.")

    st.markdown("---")
    st.markdown("""
    <div style='text-align: center; color: #666; font-size: 14px;'>
        <p>🎖️ Military Retirement Estimator | Built with Streamlit | Educational Use</p>
    </div>
    """, unsafe_allow_html=True)


st.set_page_config(
    page_title="Military Retirement Estimator",
    page_icon="🎖️",
    layout="centered",
)

pages = [
    st.Page(start_page, title="Start", icon="🏠"),
    st.Page("pages/wizard.py", title="Retirement Wizard", icon="🧙‍♂️"),
]

pg = st.navigation(pages)
pg.run()
