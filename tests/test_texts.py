import pytest

from typetrainer.texts import default_text, language_names, layout_for


def test_languages_and_layouts_line_up():
    names = language_names()
    assert len(names) == 10
    assert [layout_for(i) for i in range(len(names))][8] == "ru"
    assert names[8] == "Русский"


def test_first_layout_is_us():
    assert layout_for(0) == "us"


def test_default_russian_text():
    assert default_text(8).startswith("Солнце светит ярко")


def test_last_default_text_is_empty():
    assert default_text(10) == ""


def test_default_texts_have_no_punctuation():
    for index in range(len(language_names())):
        text = default_text(index)
        assert all(c.isalpha() or c == " " for c in text)


@pytest.mark.parametrize("index", [-1, 11])
def test_default_text_out_of_range(index):
    with pytest.raises(IndexError):
        default_text(index)


@pytest.mark.parametrize("index", [-1, 10])
def test_layout_out_of_range(index):
    with pytest.raises(IndexError):
        layout_for(index)


def test_language_names_is_a_copy():
    names = language_names()
    names.clear()
    assert language_names()[0] == "Английский"