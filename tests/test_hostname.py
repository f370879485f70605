from coroflow.net.hostname import Hostname


def test_data_returns_given_name():
    assert Hostname("www.example.com").data() == "www.example.com"


def test_default_is_empty():
    assert Hostname().data() == ""


def test_ordering_follows_text():
    names = [Hostname("b.example.com"), Hostname("a.example.com"), Hostname("c.example.com")]
    assert [h.data() for h in sorted(names)] == ["a.example.com", "b.example.com", "c.example.com"]


def test_equality_and_hash():
    assert Hostname("example.com") == Hostname("example.com")
    assert Hostname("example.com") < Hostname("example.org")
    assert len({Hostname("example.com"), Hostname("example.com")}) == 1