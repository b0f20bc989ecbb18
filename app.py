# app.py
from pathlib import Path
import sys
import importlib
import logging
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.logging_utils import setup_logging  # noqa: E402

# ==== Streamlit ====
st.set_page_config(
    page_title="PassGen",
    page_icon="🔐",
    layout="wide",
)


@st.cache_resource
def _init_logging() -> Path:
    # chỉ chạy một lần cho cả process, không phải mỗi lần rerun
    return setup_logging()


_init_logging()
logger = logging.getLogger(__name__)

# ==== Import các trang sau khi đã config ====
required_modules = {
    "password_page":   "🔐 Password",
    "mainwindow_page": "🏠 Home",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logger.error("Failed to import ui.%s", mod_name, exc_info=True)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Nếu có lỗi, hiển thị nhưng vẫn cho chạy các trang còn lại
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar điều hướng ====
choice = st.sidebar.radio(" ", list(PAGES.keys()))
PAGES[choice]()
