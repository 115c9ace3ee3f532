from ir_learner.i18n import _, get_language, init_translator


def test_english_strings():
    assert _("learn_ir") == "Learn IR"
    assert _("load_failed", error="boom") == "Failed to get things: boom"


def test_missing_key_returns_key():
    assert _("no_such_key") == "no_such_key"


def test_swedish_strings():
    init_translator("sv")
    try:
        assert get_language() == "sv"
        assert _("thing_count_many", count=3) == "3 enheter"
    finally:
        init_translator("en")


def test_unknown_language_falls_back_to_english():
    init_translator("xx")

    assert get_language() == "en"
    assert _("clear") == "Clear"
