import pytest
from pydantic import ValidationError

from starfleet.config import BoardViewSettings, InspectorSettings


def test_board_view_defaults_leave_room_for_menu():
    settings = BoardViewSettings()
    assert settings.map_height == pytest.approx(800.0)
    layout = settings.layout()
    assert layout.origin_x == 0.0
    assert layout.origin_y == 20.0
    assert layout.height == pytest.approx(800.0)


def test_board_view_rejects_menu_taller_than_window():
    with pytest.raises(ValidationError):
        BoardViewSettings(window_height=100.0, menu_height=100.0)


def test_board_view_forbids_unknown_fields():
    with pytest.raises(ValidationError):
        BoardViewSettings(columns=80)


def test_inspector_settings_validate_edge():
    assert InspectorSettings().edge == 60.0
    with pytest.raises(ValidationError):
        InspectorSettings(edge=0.0)


@pytest.mark.parametrize("edge", [float("inf"), float("nan")])
def test_inspector_settings_reject_non_finite_edge(edge):
    with pytest.raises(ValidationError):
        InspectorSettings(edge=edge)


def test_board_view_rejects_infinite_window():
    with pytest.raises(ValidationError):
        BoardViewSettings(window_height=float("inf"))
