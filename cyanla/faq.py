"""Frequently asked questions with category and keyword filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

ALL_CATEGORIES = "全部"
CATEGORIES = (ALL_CATEGORIES, "挂号预约", "就诊流程", "部门介绍", "检查检验", "医保报销", "其他服务")
MIN_SEARCH_LENGTH = 2


@dataclass(frozen=True)
class FAQItem:
    """One question with its answer."""

    category: str
    question: str
    answer: str
    helpful_count: int = 0


def default_faqs() -> list[FAQItem]:
    """Return the built-in FAQ entries."""
    return [
        FAQItem("挂号预约", "如何网上预约挂号？",
                "您可以通过以下方式进行网上预约：\n\n1. 关注公司官方微信公众号\n2. 下载公司官方APP\n3. 登录公司官网\n4. 拨打预约电话\n\n预约时需要提供您的身份证号码和手机号码。", 95),
        FAQItem("挂号预约", "预约挂号需要提前多长时间？",
                "我院预约挂号服务时间安排：\n\n• 普通门诊：可预约7天内号源\n• 专家门诊：可预约14天内号源\n• 特需门诊：可预约30天内号源\n\n建议您提前1-3天预约，以确保有合适的时间段。", 87),
        FAQItem("就诊流程", "初次就诊需要办理什么手续？",
                "初次就诊需要办理以下手续：\n\n1. 携带有效身份证件\n2. 在一楼大厅办理就诊卡\n3. 如有医保请带医保卡\n4. 到相应部门取号就诊\n\n办卡时间：周一至周日 7:00-17:00", 112),
        FAQItem("就诊流程", "就诊当天的流程是什么？",
                "就诊当天流程：\n\n1. 到院取号（如已预约）\n2. 部门候诊\n3. 医生诊疗\n4. 缴费取药/检查\n5. 复诊预约（如需要）\n\n请提前30分钟到达公司，留出足够时间。", 98),
        FAQItem("部门介绍", "各部门的位置在哪里？",
                "部门分布：\n\n• 1楼：挂号收费、安保部、惩戒部\n• 2楼：控制部、福利部门诊\n• 3楼：妇产科、培训部\n• 4楼：眼科、耳鼻喉科\n• 5楼：检验科、影像科\n\n详细位置请参考院内导向标识。", 76),
        FAQItem("检查检验", "检查前需要注意什么？",
                "不同检查的注意事项：\n\n• 血常规：无需空腹\n• 生化检查：需空腹8-12小时\n• B超检查：根据部位确定是否需要憋尿\n• CT/MRI：请提前告知是否有金属植入物\n\n具体要求请咨询开单医生。", 89),
        FAQItem("医保报销", "医保报销比例是多少？",
                "医保报销比例：\n\n• 职工医保：门诊70-90%，住院85-95%\n• 居民医保：门诊50-70%，住院70-85%\n• 新农合：门诊50-60%，住院60-80%\n\n具体比例因地区和政策而异，请咨询医保窗口。", 134),
        FAQItem("其他服务", "公司有停车场吗？",
                "公司停车信息：\n\n• 地下停车场：300个车位\n• 地面停车场：150个车位\n• 收费标准：前30分钟免费，之后每小时5元\n• 开放时间：24小时\n\n建议使用公共交通工具。", 67),
    ]


class FAQBook:
    """A browsable FAQ list narrowed by category and search keyword."""

    def __init__(self, items: Optional[Iterable[FAQItem]] = None):
        self.items: list[FAQItem] = list(items) if items is not None else default_faqs()
        self.category = ALL_CATEGORIES
        self.search_text = ""
        self.filtered: list[FAQItem] = []
        self.filter("")

    def set_category(self, category: str) -> list[FAQItem]:
        if category not in CATEGORIES:
            raise ValueError(f"unknown category: {category!r}")
        self.category = category
        return self.filter(self.search_text)

    def filter(self, keyword: str) -> list[FAQItem]:
        self.search_text = keyword
        needle = keyword.casefold()
        self.filtered = [
            item
            for item in self.items
            if (self.category == ALL_CATEGORIES or item.category == self.category)
            and (
                not keyword
                or needle in item.question.casefold()
                or needle in item.answer.casefold()
            )
        ]
        return self.filtered

    def search_text_changed(self, text: str) -> list[FAQItem]:
        """React to typing: filter on two or more characters or on clearing."""
        if len(text) >= MIN_SEARCH_LENGTH or not text:
            return self.filter(text)
        self.search_text = text
        return self.filtered

    def answer_html(self, index: int) -> str:
        if not 0 <= index < len(self.filtered):
            raise IndexError(f"no question at position {index}")
        item = self.filtered[index]
        answer = item.answer.replace("\n", "<br>")
        return f"<h3>{item.question}</h3><hr><p>{answer}</p><br><small></small>"