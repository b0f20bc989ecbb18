import streamlit as st

from core.settings_utils import default_settings_path


def render():
    st.markdown(
        """
        <style>
          .home-title{
            font-size: 44px;
            font-weight: 700;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
          }
          @media (max-width: 768px){
            .home-title{ font-size: 32px; }
          }
          @media (prefers-color-scheme: dark){
            .home-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="home-title">PassGen 🔐</div>', unsafe_allow_html=True)

    st.markdown(
        "Random passwords from the character sets you pick, with a quick strength estimate.\n\n"
        "- Length 4–128, lowercase / uppercase / digits / symbols\n"
        "- Optional: skip look-alike characters, require one of each selected type\n"
        "- Generated in your session only; nothing is sent or stored"
    )

    st.caption(f"Preferences are saved to `{default_settings_path()}`.")
    st.info("Open **Password** in the sidebar to start.")
