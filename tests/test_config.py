from ovpager.config import Config, General, new_config
from ovpager.style import OVStyle


def test_general_defaults():
    general = new_config().general
    assert general.tab_width == 8
    assert general.mark_style_width == 1
    assert general.section_start_position == 0
    assert general.jump_target == 0


def test_default_styles():
    config = new_config()
    assert config.style_header == OVStyle(bold=True)
    assert config.style_over_line == OVStyle(underline=True)
    assert config.style_search_highlight == OVStyle(reverse=True)
    assert config.style_alternate.background == "gray"
    assert config.style_mark_line.background == "darkgoldenrod"
    assert config.style_section_line.background == "slateblue"


def test_multi_color_defaults():
    names = [s.foreground for s in new_config().style_multi_color_highlight]
    assert names == ["red", "aqua", "yellow", "fuchsia", "lime", "blue", "grey"]


def test_column_rainbow_defaults():
    names = [s.foreground for s in new_config().style_column_rainbow]
    assert names == ["white", "crimson", "aqua", "lightsalmon", "lime", "blue", "yellowgreen"]


def test_configs_are_independent():
    first = new_config()
    second = new_config()
    first.general.tab_width = 4
    first.style_column_rainbow.append(OVStyle(foreground="red"))
    first.mode["csv"] = General(column_mode=True)
    assert second.general.tab_width == 8
    assert len(second.style_column_rainbow) == len(new_config().style_column_rainbow)
    assert second.mode == {}


def test_new_config_equals_default_config():
    assert new_config() == Config()