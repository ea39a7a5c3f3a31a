"""
Configuration Utilities for the Military Retirement Wizard
Pure utility functions for configuration loading, step metadata and session defaults.
Kept free of Streamlit so they can be unit tested directly.
"""

import json
import os
from typing import Dict, Any, Optional, Tuple

from pay_tables import BasePayTable, DEFAULT_PAY_TABLE, PayTableError, load_base_pay_table
from retirement import DEFAULT_LIFE_EXPECTANCY

UI_CONFIG_FILE = 'ui_config.json'


def load_ui_config(path: str = UI_CONFIG_FILE) -> Dict[str, Any]:
    """Load UI configuration from ui_config.json"""
    print(f"DEBUG [load_ui_config]: CALLED - Starting UI config load from {path}")
    try:
        if os.path.exists(path):
            with open(path, 'r') as f:
                config = json.load(f)
            if not isinstance(config, dict):
                print(f"ERROR [load_ui_config]: {path} must contain a JSON object")
                return {}
            print(f"DEBUG [load_ui_config]: Successfully loaded config with {len(config)} keys")
            return config
        else:
            print(f"DEBUG [load_ui_config]: {path} does not exist")
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR [load_ui_config]: Could not load {path}: {e}")
    return {}


# Wizard step configuration, keyed by the state machine's step ids
WIZARD_STEPS = [
    {"id": "intro", "title": "🏠 Welcome", "description": "Have your details ready"},
    {"id": "branch-selection", "title": "🎖️ Branch", "description": "Your branch of service"},
    {"id": "entry-date", "title": "📅 Entry Date", "description": "When you entered the military"},
    {"id": "rank", "title": "⭐ Rank", "description": "Your rank and pay grade"},
    {"id": "retirement-system", "title": "🏛️ Retirement System", "description": "Final Pay, High-3 or BRS"},
    {"id": "service-years", "title": "⏱️ Years of Service", "description": "Active duty years or reserve points"},
    {"id": "tsp", "title": "💰 Thrift Savings Plan", "description": "Include TSP in your planning"},
    {"id": "tsp-amount", "title": "💵 TSP Contribution", "description": "Your monthly TSP contribution"},
    {"id": "lump-sum", "title": "💸 Lump Sum", "description": "Take part of your retirement up front"},
    {"id": "summary", "title": "📋 Summary", "description": "Your estimated retirement benefits"},
]


def get_step_metadata(step_id: str) -> Dict[str, str]:
    for step in WIZARD_STEPS:
        if step["id"] == step_id:
            return step
    raise KeyError(f"No metadata for wizard step {step_id}")


def get_session_defaults(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Session defaults, overridden by ui_config.json where valid"""
    config = config or {}
    defaults = {
        'life_expectancy': DEFAULT_LIFE_EXPECTANCY,
        'pay_table_file': None,
    }

    life_expectancy = config.get('default_life_expectancy')
    if life_expectancy is not None:
        try:
            value = float(life_expectancy)
            if value > 0:
                defaults['life_expectancy'] = value
            else:
                print(f"WARNING [get_session_defaults]: Ignoring non-positive life expectancy {life_expectancy}")
        except (TypeError, ValueError):
            print(f"WARNING [get_session_defaults]: Ignoring invalid life expectancy {life_expectancy!r}")

    if config.get('pay_table_file'):
        defaults['pay_table_file'] = str(config['pay_table_file'])

    return defaults


def resolve_pay_table(pay_table_file: Optional[str]) -> Tuple[BasePayTable, Optional[str]]:
    """
    Pick the base-pay table for a session.

    Returns:
        (pay_table, warning) where warning is set when the configured file
        could not be used and the built-in table was chosen instead
    """
    if not pay_table_file:
        return DEFAULT_PAY_TABLE, None
    try:
        return load_base_pay_table(pay_table_file), None
    except PayTableError as e:
        print(f"ERROR [resolve_pay_table]: {e}")
        return DEFAULT_PAY_TABLE, f"Could not load pay table ({e}). Using built-in {DEFAULT_PAY_TABLE.version} rates."
