# ui/password_page.py
from __future__ import annotations
import json
import logging
import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from core.password_utils import generate_password, generation_notices
from core.settings_utils import (
    MAX_LENGTH,
    MIN_LENGTH,
    Settings,
    SettingsStore,
    clamp_length,
)
from core.strength_utils import entropy_bits, estimate_strength, strength_breakdown

logger = logging.getLogger(__name__)

_PREFIX = "pw_"
_FLAGS = [
    ("include_lower", "a–z"),
    ("include_upper", "A–Z"),
    ("include_numbers", "0–9"),
    ("include_symbols", "Symbols (!@#$…)"),
]
_OPTIONS = [
    ("exclude_similar_chars", "Exclude look-alike (0 O 1 l I | ` ' \")"),
    ("guarantee_each_type", "At least one of each selected type"),
]

_COLORS = {
    "low":    "linear-gradient(90deg, #ff6b6b, #ffb86b)",  # red/orange
    "mid":    "linear-gradient(90deg, #ffd166, #fef08a)",  # yellow
    "good":   "linear-gradient(90deg, #9be15d, #00e3ae)",  # green
    "strong": "linear-gradient(90deg, #7afcff, #9b7bff)",  # cyan/purple
}


def strength_color(score: int) -> str:
    if score <= 1:
        return _COLORS["low"]
    if score == 2:
        return _COLORS["mid"]
    if score == 3:
        return _COLORS["good"]
    return _COLORS["strong"]


def strength_percent(score: int) -> int:
    return round(score / 4 * 100)


# ---------------- State ----------------
def _key(name: str) -> str:
    return _PREFIX + name


def _init_state() -> None:
    if st.session_state.get(_key("loaded")):
        return
    saved = SettingsStore().load()
    length = clamp_length(saved.length)
    st.session_state[_key("length")] = length
    st.session_state[_key("length_num")] = length
    for name, _ in _FLAGS + _OPTIONS:
        st.session_state[_key(name)] = getattr(saved, name)
    st.session_state[_key("loaded")] = True


def current_settings() -> Settings:
    values = {name: bool(st.session_state[_key(name)]) for name, _ in _FLAGS + _OPTIONS}
    return Settings(length=int(st.session_state[_key("length")]), **values)


def _save() -> None:
    SettingsStore().save(current_settings())


def _on_slider() -> None:
    st.session_state[_key("length_num")] = st.session_state[_key("length")]
    _save()


def _on_number() -> None:
    v = clamp_length(st.session_state[_key("length_num")])
    st.session_state[_key("length_num")] = v
    st.session_state[_key("length")] = v
    _save()


# ---------------- Widgets ----------------
def _password_box(pw: str) -> None:
    # "<" escape để mật khẩu không đóng được thẻ <script>
    payload = json.dumps(pw).replace("<", "\\u003c")
    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  .row {{ display:flex; gap:8px; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
  #pw {{ flex:1; font-family: ui-monospace,Consolas,Monaco,monospace; font-size:16px;
        padding:8px 10px; border:1px solid #d1d5db; border-radius:8px; }}
  button.cpy {{ background:#2563eb; border:none; color:#fff; padding:6px 14px; border-radius:8px; cursor:pointer; }}
  @media (prefers-color-scheme: dark) {{
    #pw {{ background:#0b0f19; border-color:#374151; color:#e5e7eb; }}
  }}
</style>
<div class="row">
  <input id="pw" type="text" readonly />
  <button class="cpy" id="copy">Copy</button>
</div>
<script>
const pw = {payload};
const input = document.getElementById("pw");
const btn = document.getElementById("copy");
input.value = pw;

function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  input.focus();
  input.select();
  document.execCommand('copy');
  return Promise.resolve();
}}

btn.addEventListener("click", () => {{
  if (!pw) return;
  copyText(pw).then(() => {{
    btn.textContent = "Copied";
    setTimeout(() => btn.textContent = "Copy", 1600);
  }}).catch(() => {{
    alert("Clipboard blocked by browser");
  }});
}});
</script>
        """,
        height=64,
    )


def _strength_bar(pw: str) -> None:
    res = estimate_strength(pw)
    percent = strength_percent(res.score)
    text = f"{res.label} ({percent}%)" if pw else "—"
    st.markdown(
        f"""
<div style="background:#e5e7eb33;border-radius:6px;height:10px;overflow:hidden;">
  <div style="width:{percent}%;height:100%;background:{strength_color(res.score)};"></div>
</div>
<div style="margin-top:4px;">{text}</div>
        """,
        unsafe_allow_html=True,
    )


# ---------------- Page ----------------
def render() -> None:
    st.subheader("🔐 Password Generator")
    _init_state()

    colL, colR = st.columns([3, 2])
    with colL:
        st.slider("Password length", MIN_LENGTH, MAX_LENGTH, step=1,
                  key=_key("length"), on_change=_on_slider)
        st.number_input("Length", min_value=MIN_LENGTH, max_value=MAX_LENGTH, step=1,
                        key=_key("length_num"), on_change=_on_number)
    with colR:
        st.markdown("**Character sets**")
        for name, label in _FLAGS:
            st.checkbox(label, key=_key(name), on_change=_save)
        st.markdown("**Options**")
        for name, label in _OPTIONS:
            st.checkbox(label, key=_key(name), on_change=_save)

    # Streamlit rerun sau mỗi lần bấm -> sinh lại mật khẩu
    st.button("🎲 Regenerate", key=_key("regenerate"), type="primary",
              use_container_width=True, on_click=_save)

    try:
        settings = current_settings()
        pw = generate_password(settings)
        logger.debug("Generated password: length=%d", len(pw))
    except Exception as e:
        logger.error("Password generation failed: %s", e, exc_info=True)
        st.error(f"Generation error: {e}")
        return

    if not pw:
        st.info("Select at least one character set.")
    for notice in generation_notices(settings):
        st.warning(notice)

    _password_box(pw)
    _strength_bar(pw)

    if pw:
        with st.expander("Strength details"):
            st.caption(f"Estimated entropy: **{entropy_bits(pw):.1f} bits**")
            df = pd.DataFrame(strength_breakdown(pw)).set_index("Class")
            st.dataframe(df, use_container_width=True)
