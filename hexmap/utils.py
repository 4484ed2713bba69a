import logging
import sys

import streamlit as st

from colorama import Fore, Style, init as colorama_init
from hexmap.settings import APPLICATION_NAME


colorama_init(autoreset=True)

LOG_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.MAGENTA + Style.BRIGHT,
}

class ColorFormatter(logging.Formatter):
    def __init__(self, use_color=True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def format(self, record):
        levelname = record.levelname
        if self.use_color and levelname in LOG_LEVEL_COLORS:
            color = LOG_LEVEL_COLORS[levelname]
            record.levelname = f"{color}{levelname}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_logger(name: str = __name__, log_level: str = 'INFO') -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        return logger

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    use_color = sys.stdout.isatty()
    formatter = ColorFormatter(
        use_color=use_color,
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


logger = get_logger(__name__)


def build_main_common_components(page_name: str, show_title: bool = True):
    try:
        st.set_page_config(
            page_title=f"{page_name} - {APPLICATION_NAME}",
            layout="wide",
            initial_sidebar_state="expanded",
        )
    except Exception as e:
        logger.warning(e)

    if show_title:
        st.title(page_name)

    hide_decoration_bar_style = '''
        <style>[data-testid="stDecoration"] {display:none;}</style>
    '''
    st.markdown(hide_decoration_bar_style, unsafe_allow_html=True)
