from .console import UIContext, get_ui
from .formatters import render_error, render_json, render_results_table, render_summary

__all__ = [
    "UIContext",
    "get_ui",
    "render_error",
    "render_json",
    "render_results_table",
    "render_summary",
]
