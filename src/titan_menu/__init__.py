from .client import TitanSchoolsClient
from .config import BUFFER_DAYS, MenuSettings, configure_logging, get_settings, load_menu_config
from .exceptions import (
    ConfigurationError,
    TitanApiError,
    TitanMenuError,
    UpstreamRejected,
    UpstreamUnavailable,
)
from .extract import extract_menus_by_date
from .formatting import FormatOptions, classify_category, format_menu, join_with_conjunction, merge_with_items
from .models import CalendarDay, CategoryKind, ExtractedDayMenu, MealType, ScheduleDay
from .schedule import select_days, upcoming_relative_dates

__version__ = "0.1.0"

__all__ = [
    # Client
    "TitanSchoolsClient",
    # Config
    "BUFFER_DAYS",
    "MenuSettings",
    "configure_logging",
    "get_settings",
    "load_menu_config",
    # Errors
    "TitanMenuError",
    "ConfigurationError",
    "TitanApiError",
    "UpstreamUnavailable",
    "UpstreamRejected",
    # Pipeline
    "extract_menus_by_date",
    "FormatOptions",
    "classify_category",
    "format_menu",
    "join_with_conjunction",
    "merge_with_items",
    "select_days",
    "upcoming_relative_dates",
    # Models
    "CalendarDay",
    "CategoryKind",
    "ExtractedDayMenu",
    "MealType",
    "ScheduleDay",
]
