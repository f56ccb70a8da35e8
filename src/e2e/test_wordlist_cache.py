import threading
from pathlib import Path

import pytest

from wordcomplete import config as CFG
from wordcomplete.resources import DirectoryLoader, MemoryLoader, PackageLoader, make_loader
from wordcomplete.wordlist import WordListCache


def _memory(**lists: str) -> MemoryLoader:
    return MemoryLoader({f"completionList.{code}.txt": text for code, text in lists.items()})


def test_splits_trimmed_text_on_newlines():
    cache = WordListCache(_memory(en="\n  foo\nfood\nbar  \n\n"))
    assert cache.get("en") == ("foo", "food", "bar")


def test_malformed_code_is_empty_and_never_cached():
    loader = _memory(en="foo")
    cache = WordListCache(loader)
    assert cache.get("en;drop") == ()
    assert cache.get("en;drop") == ()
    assert "en;drop" not in cache
    assert len(cache) == 0
    assert sum(loader.reads.values()) == 0


@pytest.mark.parametrize("code", ["", "en_US", "de1", "../en", "en\n"])
def test_other_malformed_codes(code):
    cache = WordListCache(_memory(en="foo"))
    assert cache.get(code) == ()
    assert code not in cache


def test_resource_read_once_per_code():
    loader = _memory(**{"en-US": "alpha\nbeta"})
    cache = WordListCache(loader)
    first = cache.get("en-US")
    second = cache.get("en-US")
    assert first == ("alpha", "beta")
    assert second is first
    assert loader.reads["completionList.en-US.txt"] == 1


def test_missing_resource_cached_as_empty():
    loader = _memory()
    cache = WordListCache(loader)
    assert cache.get("xx") == ()
    assert cache.get("xx") == ()
    assert "xx" in cache
    assert loader.reads["completionList.xx.txt"] == 1


def test_whitespace_only_resource_is_empty():
    cache = WordListCache(_memory(en=" \n\t\n"))
    assert cache.get("en") == ()


def test_codes_are_case_sensitive_keys():
    loader = _memory(en="one", EN="two")
    cache = WordListCache(loader)
    assert cache.get("en") == ("one",)
    assert cache.get("EN") == ("two",)


def test_unreadable_resource_degrades_to_empty():
    class Broken:
        def load(self, name):
            raise PermissionError(name)

    cache = WordListCache(Broken())
    assert cache.get("en") == ()


def test_concurrent_lookups_load_once():
    loader = _memory(en="\n".join(f"w{i}" for i in range(1000)))
    cache = WordListCache(loader)
    results = []

    def worker():
        results.append(cache.get("en"))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert loader.reads["completionList.en.txt"] == 1
    assert all(r is results[0] for r in results)
    assert len(results[0]) == 1000


def test_directory_loader(tmp_path: Path):
    (tmp_path / "completionList.fr.txt").write_text("bonjour\nbonsoir\n", encoding="utf-8")
    cache = WordListCache(make_loader(f"file://{tmp_path}"))
    assert isinstance(cache.loader, DirectoryLoader)
    assert cache.get("fr") == ("bonjour", "bonsoir")
    assert cache.get("de") == ()


def test_bundled_english_list():
    cache = WordListCache(make_loader(f"package://{CFG.RESOURCE_PACKAGE}"))
    assert isinstance(cache.loader, PackageLoader)
    words = cache.get("en")
    assert "the" in words and "which" in words
    assert cache.get("zz-ZZ") == ()


def test_unsupported_dsn():
    with pytest.raises(ValueError):
        make_loader("http://example.com/lists")
