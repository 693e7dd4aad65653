# -*- coding: utf-8 -*-
"""
UI module
Terminal front end for the card game simulator
"""

from .input_safety import safe_input
from .rich_ui import RichTerminalUI, parse_card_numbers

__all__ = ['RichTerminalUI', 'parse_card_numbers', 'safe_input']
