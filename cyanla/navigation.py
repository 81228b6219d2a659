"""Visitor navigation panel: department search, selection, zoom and routes."""

from __future__ import annotations

from typing import Mapping, Optional

from cyanla.mapview import MAX_ZOOM, MIN_ZOOM, CompanyMap, Department, Rect

ALL_FLOORS = "全部"
FLOORS = (ALL_FLOORS, "1楼", "2楼", "3楼", "4楼", "5楼")
ZOOM_STEP = 1.2
ROUTE_START = "门诊大厅"
EMERGENCY = "惩戒部"
DEFAULT_TITLE = "请选择部门查看详细信息"
DEFAULT_CONTENT = "点击左侧部门列表或地图上的部门区域"
NO_TARGET = "请先选择目标部门"


def format_department_info(department: Department) -> str:
    """Describe a department for the information panel."""
    return (
        f"📍 位置: {department.location}\n"
        f"⏰ 时间: {department.hours}\n"
        f"📞 电话: {department.phone}\n"
        f"🏢 楼层: {department.floor}\n\n"
        f"{department.description}"
    )


def default_departments() -> dict[str, Department]:
    """Return the built-in departments of the company map, keyed by name."""
    entries = (
        Department("惩戒部", "24小时急诊医疗服务", "1楼东侧", "24小时", "120",
                   Rect(600, 450, 120, 80), "#FF6B6B", "1楼", "门诊楼"),
        Department("门诊大厅", "挂号、导诊、咨询服务", "1楼中央", "8:00-17:00", "0571-12345",
                   Rect(350, 450, 150, 80), "#4ECDC4", "1楼"),
        Department("安保部", "处方药品调配发放", "1楼南侧", "8:00-17:00", "0571-12346",
                   Rect(80, 450, 100, 80), "#45B7D1", "1楼"),
        Department("收费处", "医疗费用结算", "1楼西侧", "8:00-17:00", "0571-12347",
                   Rect(200, 450, 120, 80), "#96CEB4", "1楼"),
        Department("控制部", "控制部疾病诊治", "2楼东侧", "8:00-17:00", "0571-12348",
                   Rect(600, 350, 120, 80), "#FFEAA7", "2楼"),
        Department("福利部", "福利部手术治疗", "2楼西侧", "8:00-17:00", "0571-12349",
                   Rect(80, 350, 120, 80), "#DDA0DD", "2楼"),
        Department("检验科", "医学检验服务", "2楼中央", "8:00-17:00", "0571-12350",
                   Rect(350, 350, 120, 80), "#74B9FF", "2楼"),
        Department("放射科", "医学影像诊断", "3楼东侧", "8:00-17:00", "0571-12351",
                   Rect(600, 250, 120, 80), "#FFB8B8", "3楼"),
        Department("培训部", "儿童疾病诊治", "3楼西侧", "8:00-17:00", "0571-12352",
                   Rect(80, 250, 120, 80), "#FFD93D", "3楼"),
        Department("妇产科", "妇科产科诊疗", "3楼中央", "8:00-17:00", "0571-12353",
                   Rect(350, 250, 120, 80), "#FF8FA3", "3楼"),
        Department("停车场A", "地下停车场", "地下一层", "24小时", "0571-12354",
                   Rect(80, 550, 300, 40), "#CCCCCC", "地下"),
    )
    return {department.name: department for department in entries}


class Navigator:
    """Search, select and route between departments on the company map."""

    def __init__(self, departments: Optional[Mapping[str, Department]] = None):
        self.departments: dict[str, Department] = (
            dict(departments) if departments is not None else default_departments()
        )
        self.map = CompanyMap(self.departments)
        self.zoom = 1.0
        self.keyword = ""
        self.floor = ALL_FLOORS
        self.selected = ""
        self.info_title = DEFAULT_TITLE
        self.info_content = DEFAULT_CONTENT
        self.route_enabled = False

    def filter(self, keyword: str = "", floor: str = ALL_FLOORS) -> list[str]:
        """Return department names matching the floor and keyword, in name order."""
        if floor not in FLOORS:
            raise ValueError(f"unknown floor: {floor!r}")
        self.keyword = keyword.strip()
        self.floor = floor
        needle = self.keyword.casefold()
        return [
            name
            for name in sorted(self.departments)
            if (floor == ALL_FLOORS or self.departments[name].floor == floor)
            and (
                not needle
                or needle in name.casefold()
                or needle in self.departments[name].description.casefold()
            )
        ]

    def list_info(self, keyword: str = "", floor: str = ALL_FLOORS) -> str:
        """Describe how many departments the current filter shows."""
        count = len(self.filter(keyword, floor))
        if not self.keyword and floor == ALL_FLOORS:
            return f"显示全部 {count} 个部门"
        return f"筛选结果: {count} 个部门"

    def select(self, name: str) -> Department:
        """Select and highlight a department, filling the information panel."""
        try:
            department = self.departments[name]
        except KeyError:
            raise KeyError(f"unknown department: {name!r}") from None
        self.selected = name
        self.map.highlight(name)
        self.info_title = department.name
        self.info_content = format_department_info(department)
        self.route_enabled = True
        return department

    def clear_selection(self) -> None:
        self.keyword = ""
        self.floor = ALL_FLOORS
        self.map.clear_highlight()
        self.selected = ""
        self.info_title = DEFAULT_TITLE
        self.info_content = DEFAULT_CONTENT
        self.route_enabled = False

    def zoom_in(self) -> float:
        self.zoom = min(MAX_ZOOM, self.zoom * ZOOM_STEP)
        return self.map.set_zoom(self.zoom)

    def zoom_out(self) -> float:
        self.zoom = max(MIN_ZOOM, self.zoom / ZOOM_STEP)
        return self.map.set_zoom(self.zoom)

    def reset_view(self) -> float:
        self.zoom = 1.0
        return self.map.set_zoom(self.zoom)

    def route_message(self) -> str:
        """Plan the route to the selected department and describe it."""
        if not self.selected:
            raise ValueError(NO_TARGET)
        location = self.departments[self.selected].location
        message = (
            f"路线规划\n\n从: 公司正门\n到: {self.selected}\n\n"
            f"路线: 正门 → {ROUTE_START} → {location}"
        )
        self.map.show_route(ROUTE_START, self.selected)
        return message

    def emergency_route(self) -> list[tuple[int, int]]:
        """Select the emergency department and plan the route to it."""
        self.select(EMERGENCY)
        return self.map.show_route(ROUTE_START, EMERGENCY)