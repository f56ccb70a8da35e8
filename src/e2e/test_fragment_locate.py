from wordcomplete import fragments as F
from wordcomplete.fragments import PlaintextFragmentizer, create_fragmentizer, locate
from wordcomplete.models import CodeFragment, Settings


def _frag(from_pos: int, code: str, lang: str = "plaintext") -> CodeFragment:
    return CodeFragment(lang, code, from_pos)


def test_single_fragment_gives_local_offset():
    frag = _frag(10, "some text")
    assert locate([frag], 12) == (frag, 2)


def test_half_open_span():
    frag = _frag(10, "abc")
    assert locate([frag], 10) == (frag, 0)
    assert locate([frag], 12) == (frag, 2)
    assert locate([frag], 13) is None
    assert locate([frag], 9) is None


def test_nested_fragment_wins():
    outer = _frag(0, "x" * 100, "markdown")
    inner = _frag(40, "y" * 10, "latex")
    assert locate([outer, inner], 45) == (inner, 5)
    # order of the input does not matter
    assert locate([inner, outer], 45) == (inner, 5)
    # outside the inner span the outer one is used
    assert locate([outer, inner], 60) == (outer, 60)


def test_equal_start_keeps_first_match():
    a = _frag(5, "aaaaaa")
    b = _frag(5, "bbbbbbbbbb")
    frag, local = locate([a, b], 7)
    assert frag is a and local == 2


def test_no_fragments():
    assert locate([], 0) is None


def test_empty_fragment_never_matches():
    assert locate([_frag(3, "")], 3) is None


def test_plaintext_fragmentizer_covers_whole_text():
    settings = Settings("de-DE", ("Wort",))
    frags = PlaintextFragmentizer().fragmentize("Hallo Welt", settings)
    assert frags == [CodeFragment("plaintext", "Hallo Welt", 0, settings)]


def test_unknown_dialect_falls_back_to_plaintext():
    assert isinstance(create_fragmentizer("no-such-dialect"), PlaintextFragmentizer)


def test_registered_fragmentizer_is_used(monkeypatch):
    class TwoHalves:
        def fragmentize(self, code, settings):
            half = len(code) // 2
            return [
                CodeFragment("plaintext", code[:half], 0, settings),
                CodeFragment("plaintext", code[half:], half, settings),
            ]

    monkeypatch.setitem(F._FRAGMENTIZERS, "halves", TwoHalves)
    frags = create_fragmentizer("halves").fragmentize("abcdef", Settings())
    assert [f.from_pos for f in frags] == [0, 3]
