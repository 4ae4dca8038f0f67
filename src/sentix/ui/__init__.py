"""Streamlit user interface for Sentix."""

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

APP_PATH = Path(__file__).parent / "streamlit_app.py"


def run_streamlit_app():
    """Launch the dashboard with ``streamlit run``."""
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(APP_PATH)
        ], check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


__all__ = ["APP_PATH", "run_streamlit_app"]
