import pytest

from cyanla.mapview import CompanyMap, Department, Rect


def _dept(name, rect, location="1楼东侧", hours="24小时"):
    return Department(
        name=name,
        description="desc",
        location=location,
        hours=hours,
        phone="0000",
        rect=rect,
        color="#FF6B6B",
        floor="1楼",
    )


@pytest.fixture
def company_map():
    return CompanyMap(
        {
            "惩戒部": _dept("惩戒部", Rect(600, 450, 120, 80)),
            "门诊大厅": _dept("门诊大厅", Rect(350, 450, 150, 80), "1楼中央", "8:00-17:00"),
            "控制部": _dept("控制部", Rect(600, 350, 120, 80), "2楼东侧", "8:00-17:00"),
        }
    )


def test_rect_contains_edges():
    rect = Rect(600, 450, 120, 80)
    assert rect.contains(600, 450)
    assert rect.contains(rect.right, rect.bottom)
    assert not rect.contains(rect.x + rect.width, 450)
    assert not rect.contains(600, rect.y + rect.height)
    assert not rect.contains(599, 460)


def test_rect_center_inside():
    rect = Rect(80, 550, 300, 40)
    cx, cy = rect.center()
    assert rect.contains(cx, cy)
    assert cx - rect.x == rect.right - cx or cx - rect.x + 1 == rect.right - cx


def test_empty_rect_contains_nothing():
    assert not Rect(10, 10, 0, 5).contains(10, 10)


def test_set_zoom_clamps(company_map):
    assert company_map.set_zoom(10) == 3.0
    assert company_map.set_zoom(0.1) == 0.5
    assert company_map.set_zoom(1.5) == 1.5
    assert company_map.size_hint == (1200, 900)


def test_department_at(company_map):
    assert company_map.department_at(650, 490) == "惩戒部"
    assert company_map.department_at(5, 5) is None


def test_department_at_with_zoom(company_map):
    company_map.set_zoom(2.0)
    assert company_map.department_at(1300, 980) == "惩戒部"
    assert company_map.department_at(650, 490) is None


def test_department_at_overlap_uses_name_order():
    overlapping = CompanyMap(
        {"b": _dept("b", Rect(0, 0, 50, 50)), "a": _dept("a", Rect(0, 0, 50, 50))}
    )
    assert overlapping.department_at(10, 10) == "a"


def test_highlight_and_clear(company_map):
    company_map.highlight("控制部")
    assert company_map.highlighted == "控制部"
    assert company_map.pulsing
    company_map.hovered = "惩戒部"
    company_map.clear_highlight()
    assert company_map.highlighted == ""
    assert company_map.hovered == ""
    assert not company_map.pulsing


def test_highlight_empty_resets_opacity(company_map):
    company_map.pulse_opacity = 0.3
    company_map.highlight("")
    assert company_map.pulse_opacity == 1.0
    assert not company_map.pulsing


def test_show_route_is_l_shaped(company_map):
    points = company_map.show_route("门诊大厅", "控制部")
    start = company_map.departments["门诊大厅"].rect.center()
    end = company_map.departments["控制部"].rect.center()
    assert points == [start, (start[0], end[1]), end]
    assert company_map.route_animating
    assert (company_map.route_from, company_map.route_to) == ("门诊大厅", "控制部")


def test_show_route_unknown_keeps_previous(company_map):
    first = company_map.show_route("门诊大厅", "惩戒部")
    again = company_map.show_route("门诊大厅", "nowhere")
    assert again == first
    assert company_map.route_to == "nowhere"


def test_route_animation_wraps(company_map):
    steps = [company_map.advance_route_animation() for _ in range(20)]
    assert steps[-1] == 0
    assert max(steps) == 19


def test_tooltip(company_map):
    assert company_map.tooltip("门诊大厅") == "门诊大厅\n1楼中央\n开放时间: 8:00-17:00"


def test_tooltip_unknown(company_map):
    with pytest.raises(KeyError):
        company_map.tooltip("nowhere")