"""Console styling for Task CLI."""

from rich.console import Console
from rich.theme import Theme

from .config import ConfigModel
from .task import Priority

CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'critical': '#FF5370',
    'text_primary': '#B7C5D3',
    'text_muted': '#4F5B66',
}

TASK_THEME = Theme({
    'default': CITY_LIGHTS_COLORS['text_primary'],
    'muted': CITY_LIGHTS_COLORS['text_muted'],
    'bright': f"{CITY_LIGHTS_COLORS['text_primary']} bold",
    'header': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'priority_high': f"{CITY_LIGHTS_COLORS['critical']} bold",
    'priority_medium': CITY_LIGHTS_COLORS['warning'],
    'priority_low': CITY_LIGHTS_COLORS['text_primary'],
    'priority_other': CITY_LIGHTS_COLORS['text_muted'],
})

PRIORITY_STYLES = {
    Priority.HIGH: 'priority_high',
    Priority.MEDIUM: 'priority_medium',
    Priority.LOW: 'priority_low',
}

STATUS_EMOJI = {
    True: "✅",
    False: "⏳",
}


def get_priority_style(priority: int) -> str:
    """Rich style name for a priority value."""
    try:
        return PRIORITY_STYLES[Priority(priority)]
    except ValueError:
        return 'priority_other'


def get_status_emoji(completed: bool, use_emoji: bool = True) -> str:
    return STATUS_EMOJI[completed] if use_emoji else ""


def get_themed_console(config: ConfigModel, **kwargs) -> Console:
    """Create a console honoring the color settings in ``config``."""
    return Console(theme=TASK_THEME, no_color=config.no_color, highlight=False, **kwargs)
