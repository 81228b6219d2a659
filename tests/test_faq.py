import pytest

from cyanla.faq import CATEGORIES, FAQBook, FAQItem, default_faqs


def test_default_faqs_categories_are_known():
    items = default_faqs()
    assert len(items) == 8
    assert all(item.category in CATEGORIES[1:] for item in items)


def test_initial_book_shows_everything():
    book = FAQBook()
    assert book.filtered == default_faqs()


def test_set_category_narrows():
    book = FAQBook()
    result = book.set_category("挂号预约")
    assert [i.question for i in result] == ["如何网上预约挂号？", "预约挂号需要提前多长时间？"]
    assert book.set_category("全部") == default_faqs()


def test_set_category_unknown_raises():
    with pytest.raises(ValueError):
        FAQBook().set_category("餐饮")


def test_filter_is_case_insensitive_on_answer():
    book = FAQBook()
    assert [i.question for i in book.filter("ct/mri")] == ["检查前需要注意什么？"]


def test_filter_combines_category_and_keyword():
    book = FAQBook()
    book.set_category("就诊流程")
    assert book.filter("停车") == []


def test_search_text_changed_threshold():
    book = FAQBook()
    before = list(book.filtered)
    assert book.search_text_changed("停") == before
    assert [i.question for i in book.search_text_changed("停车")] == ["公司有停车场吗？"]
    assert book.search_text_changed("") == default_faqs()


def test_category_change_reuses_search_text():
    book = FAQBook()
    book.search_text_changed("医保")
    everywhere = list(book.filtered)
    assert all("医保" in i.question or "医保" in i.answer for i in everywhere)
    narrowed = book.set_category("医保报销")
    assert narrowed == [i for i in everywhere if i.category == "医保报销"]


def test_answer_html_format():
    book = FAQBook()
    html = book.answer_html(0)
    assert html.startswith("<h3>如何网上预约挂号？</h3><hr><p>")
    assert html.endswith("</p><br><small></small>")
    assert "\n" not in html
    assert "<br><br>1. 关注公司官方微信公众号<br>" in html


def test_answer_html_out_of_range():
    book = FAQBook([FAQItem("其他服务", "Q", "A")])
    assert book.answer_html(0) == "<h3>Q</h3><hr><p>A</p><br><small></small>"
    with pytest.raises(IndexError):
        book.answer_html(1)
    with pytest.raises(IndexError):
        book.answer_html(-1)