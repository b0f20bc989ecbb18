"""
tests/test_password_page.py
===========================
Page smoke tests through streamlit.testing.v1.AppTest; settings go to tmp_path.
"""
import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from core.settings_utils import STORAGE_KEY, Settings
from ui.password_page import strength_color, strength_percent

APP = str(Path(__file__).resolve().parent.parent / "app.py")
FLAGS = ["include_lower", "include_upper", "include_numbers", "include_symbols"]


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSGEN_DATA_DIR", str(tmp_path))
    return tmp_path


def _run():
    return AppTest.from_file(APP, default_timeout=30).run()


class TestStrengthDisplay:

    @pytest.mark.parametrize("score,percent", [(0, 0), (1, 25), (2, 50), (3, 75), (4, 100)])
    def test_percent(self, score, percent):
        assert strength_percent(score) == percent

    def test_colors(self):
        assert strength_color(0) == strength_color(1)
        assert len({strength_color(s) for s in (1, 2, 3, 4)}) == 4


class TestPasswordPage:

    def test_renders_with_defaults(self, data_dir):
        at = _run()
        assert not at.exception
        assert at.slider(key="pw_length").value == Settings().length
        assert at.number_input(key="pw_length_num").value == Settings().length
        assert not at.info

    def test_loads_saved_settings(self, data_dir):
        saved = Settings(length=24, include_symbols=False).to_dict()
        (data_dir / "settings.json").write_text(json.dumps({STORAGE_KEY: saved}), encoding="utf-8")
        at = _run()
        assert not at.exception
        assert at.slider(key="pw_length").value == 24
        assert at.checkbox(key="pw_include_symbols").value is False

    def test_out_of_range_saved_length_is_clamped(self, data_dir):
        saved = Settings(length=1000).to_dict()
        (data_dir / "settings.json").write_text(json.dumps({STORAGE_KEY: saved}), encoding="utf-8")
        at = _run()
        assert not at.exception
        assert at.slider(key="pw_length").value == 128

    def test_no_class_selected(self, data_dir):
        at = _run()
        for name in FLAGS:
            at.checkbox(key=f"pw_{name}").uncheck()
        at.run()
        assert not at.exception
        assert any("Select at least one" in i.value for i in at.info)

        data = json.loads((data_dir / "settings.json").read_text(encoding="utf-8"))
        assert data[STORAGE_KEY]["includeLower"] is False
        assert data[STORAGE_KEY]["includeSymbols"] is False

    def test_length_change_is_saved(self, data_dir):
        at = _run()
        at.slider(key="pw_length").set_value(40).run()
        assert not at.exception
        assert at.number_input(key="pw_length_num").value == 40
        data = json.loads((data_dir / "settings.json").read_text(encoding="utf-8"))
        assert data[STORAGE_KEY]["length"] == 40

    def test_regenerate_reruns_and_saves(self, data_dir):
        at = _run()
        settings_file = data_dir / "settings.json"
        assert not settings_file.exists()
        at.button(key="pw_regenerate").click().run()
        assert not at.exception
        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data[STORAGE_KEY] == Settings().to_dict()
