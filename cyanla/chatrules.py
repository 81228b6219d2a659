"""Rule-based replies, quality analysis and action buttons for the HR assistant."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

HUMAN_ACTION = "转人工客服"

WELCOME_TEXT = (
    "您好！我是青蓝公司智能HR助手\n\n我可以帮助您：\n"
    "• 告诉我您的性格特长，推荐合适部门\n• 解答公司相关问题\n"
    "•  识别您与公司及部门合适度，还能帮您安排面试 \n• 转接人工客服\n\n"
    "请描述您的问题开始咨询！"
)
CLEARED_TEXT = "聊天记录已清空。我是公司智能HR助手，请问有什么可以帮助您的吗？"
TRANSFER_NOTICE = "正在为您转接人工客服，请稍候..."
BACK_TO_AI_TEXT = "欢迎回到AI智能HR！有什么可以帮助您的吗？"
ERROR_PREFIX = "抱歉，AI服务暂时不可用，为您提供基础HR建议：\n\n"
ERROR_ACTIONS = ("🔍 症状自查", "📅 预约挂号", "👤 转人工客服")
FITNESS_ACTIONS = ("立即急诊", "拨打120", HUMAN_ACTION)

DEPARTMENTS = (
    "控制部",
    "福利部",
    "记录部",
    "培训部",
    "研发部",
    "情报部",
    "安保部",
    "中央本部一区",
    "中央本部二区",
    "惩戒部",
)

QUALITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "勇气": ("勇气", "勇敢", "强壮", "积极", "上进", "外向"),
    "谨慎": ("谨慎", "内向", "善良", "细心"),
    "自律": ("自律", "约束", "纪律", "规矩"),
    "正义": ("正义", "责任", "热情", "梦想"),
}

TRANSFER_KEYWORDS = ("转人工", "换人工", "要人工", "人工客服", "真人客服", "联系客服")
FITNESS_KEYWORDS = ("天才", "特色", "首脑", "爪牙", "血魔", "都市之星")


class MessageType(IntEnum):
    """Who a chat message comes from."""

    USER = 0
    ROBOT = 1
    SYSTEM = 2
    QUICK_REPLY = 3


@dataclass
class ChatMessage:
    """One message in an assistant conversation."""

    content: str
    type: MessageType
    timestamp: datetime = field(default_factory=datetime.now)
    session_id: str = ""


@dataclass(frozen=True)
class TriageAdvice:
    """A department recommendation drawn from what the visitor wrote."""

    department: str = ""
    reason: str = ""
    action: str = ""
    need_appointment: bool = False
    fitness: bool = False


def _contains_any(text: str, words) -> bool:
    return any(word in text for word in words)


def wants_human(text: str) -> bool:
    """Return whether the text asks directly for a human agent."""
    return _contains_any(text.lower(), TRANSFER_KEYWORDS)


def generate_response(text: str) -> str:
    """Return the built-in reply used when the AI service is unavailable."""
    lowered = text.lower()

    if _contains_any(lowered, FITNESS_KEYWORDS):
        return (
            "⚠️ 根据您描述的特点，您可能是我们公司在找的人才！！"
            "建议您立即前往惩戒部寻找堂吉诃德先生参与面试与培训！\n\n"
            "惩戒部位置：公司1楼\n惩戒部电话：114514"
        )
    if _contains_any(lowered, ("勇气", "勇敢", "强壮")):
        return (
            "根据您的发热症状，我需要了解更多信息：\n\n• 体温多少度？\n• 持续多长时间了？\n"
            "• 是否伴随其他症状？\n\n一般情况下：\n🌡️ 38.5°C以下：建议物理降温\n"
            "🌡️ 38.5°C以上：建议控制部就诊\n🚨 持续高热：建议惩戒部\n\n"
            "如需更详细的诊断，建议点击下方转人工客服。"
        )
    if _contains_any(lowered, ("头疼", "头痛", "头晕")):
        return (
            "关于头痛症状，我来帮您分析：\n\n请问：\n• 疼痛程度如何？\n• 是否伴随恶心呕吐？\n"
            "• 最近有没有外伤？\n\n建议部门：\n🧠 神经控制部：偏头痛、神经性头痛\n"
            "👁️ 眼科：视力相关头痛\n🏥 控制部：感冒引起的头痛\n\n如需专业医生诊断，可转接人工客服。"
        )
    if _contains_any(lowered, ("咳嗽", "咳痰")):
        return (
            "咳嗽症状分析：\n\n请描述：\n• 干咳还是有痰？\n• 持续时间？\n• 是否伴随发热？\n\n"
            "推荐部门：\n🫁 呼吸控制部：持续咳嗽、咳痰\n👶 培训部：小儿咳嗽\n"
            "🏥 控制部：一般性咳嗽\n\n需要详细诊断建议转人工客服。"
        )
    if _contains_any(lowered, TRANSFER_KEYWORDS):
        return "好的，正在为您转接人工客服，请稍候..."
    if _contains_any(lowered, ("人工", "客服", "医生")):
        return (
            "我可以为您转接人工客服：\n\n🏥 人工客服可以提供：\n• 专业医疗咨询\n• 详细症状分析\n"
            "• 预约挂号协助\n• 公司相关服务\n\n💬 输入\"转人工\"可直接转接\n"
            "📱 或点击下方\"转人工客服\"按钮"
        )
    if _contains_any(lowered, ("预约", "挂号")):
        return (
            "关于预约挂号：\n\n📱 预约方式：\n• 微信公众号预约\n• 手机APP预约\n• 现场挂号\n"
            "• 电话预约：[phone]\n\n⏰ 预约时间：\n• 普通门诊：提前3天\n• 专家门诊：提前7天\n\n"
            "需要预约协助？建议转接人工客服。"
        )
    return (
        "我理解您的症状描述。为了给您更准确的建议，请提供更多详细信息：\n\n• 症状持续时间\n"
        "• 疼痛或不适程度\n• 是否伴随其他症状\n• 您的年龄范围\n\n"
        "如需专业医生诊断，建议转人工客服获得更详细的医疗建议。"
    )


def analyze_qualities(text: str) -> TriageAdvice:
    """Derive a department recommendation from the visitor's description."""
    lowered = text.lower()
    if _contains_any(lowered, ("发烧", "发热")):
        return TriageAdvice(
            department="控制部",
            reason="发热症状通常需要控制部医生评估",
            need_appointment=True,
            fitness=_contains_any(lowered, ("高烧", "39")),
        )
    if _contains_any(lowered, ("咳嗽", "呼吸")):
        return TriageAdvice(
            department="呼吸控制部",
            reason="呼吸道症状建议看呼吸控制部",
            need_appointment=True,
        )
    if _contains_any(lowered, ("头痛", "头晕")):
        return TriageAdvice(
            department="神经控制部",
            reason="头部不适建议神经控制部检查",
            need_appointment=True,
        )
    return TriageAdvice()


def advice_actions(advice: TriageAdvice) -> list[str]:
    """Return the action buttons a piece of advice calls for."""
    if advice.fitness:
        return list(FITNESS_ACTIONS)
    return []


def action_buttons_for(emergency_level: str, department: str = "") -> list[str]:
    """Return the action buttons shown after an AI reply."""
    if emergency_level == "critical":
        return ["🚨 立即急诊", "📞 拨打120", "👤 转人工客服"]
    if emergency_level == "high":
        return ["🏥 尽快就医", "📞 预约挂号", "👤 转人工客服"]
    if department:
        return [f"📅 预约{department}", "🔍 查看更多部门", "👤 转人工客服"]
    return ["🔍 症状分析", "📅 预约挂号", "👤 转人工客服"]


def format_timestamp(timestamp: datetime) -> str:
    """Format a message time as hh:mm."""
    return timestamp.strftime("%H:%M")


def new_session_id() -> str:
    """Return a fresh random session identifier."""
    return str(uuid.uuid4())