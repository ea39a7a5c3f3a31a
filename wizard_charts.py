"""
Wizard Chart Utilities
Chart creation functions for the retirement wizard summary step.
"""

import numpy as np
import plotly.graph_objects as go

from retirement import MULTIPLIER, MAX_YEARS_OF_SERVICE, DEFAULT_LIFE_EXPECTANCY


def create_pay_by_years_chart(base_pay, years_of_service, multiplier=MULTIPLIER):
    """Monthly retirement pay across 0-40 years of service, highlighting the user's years"""
    years = np.arange(0, MAX_YEARS_OF_SERVICE + 1)
    monthly_pay = base_pay * multiplier * years

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years,
        y=monthly_pay,
        mode='lines',
        line=dict(color='#4ECDC4', width=3),
        name='Monthly Pay',
        hovertemplate='%{x} years: $%{y:,.2f}/month<extra></extra>'
    ))
    fig.add_trace(go.Scatter(
        x=[years_of_service],
        y=[base_pay * multiplier * years_of_service],
        mode='markers+text',
        marker=dict(size=14, color='#FF6B6B'),
        text=['You'],
        textposition='top center',
        name='Your Estimate',
        showlegend=False
    ))

    fig.update_layout(
        title="Monthly Retirement Pay by Years of Service",
        xaxis_title="Years of Service",
        yaxis_title="Monthly Pay ($)",
        height=400,
        template="plotly_white"
    )

    return fig


def create_lump_sum_breakdown_chart(monthly_pay, lump_sum, life_expectancy=None):
    """Split of total retirement value between lump sum and remaining payments"""
    months_remaining = (life_expectancy or DEFAULT_LIFE_EXPECTANCY) * 12
    total_value = monthly_pay * months_remaining
    remaining = max(total_value - lump_sum, 0)

    fig = go.Figure(data=[go.Pie(
        labels=['Lump Sum', 'Remaining Value'],
        values=[lump_sum, remaining],
        hole=0.4,
        marker_colors=['#FF6B6B', '#45B7D1'],
        textinfo='label+percent',
        textposition='outside'
    )])

    fig.update_layout(
        title="Total Retirement Value",
        font=dict(size=14),
        height=400,
        showlegend=False
    )

    return fig
