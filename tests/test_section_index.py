from docindex.index.model import IndexEntry, SectionKey
from docindex.index.section_index import SectionIndex


def test_get_or_create_returns_same_list():
    index = SectionIndex()
    a = index.get_or_create(SectionKey("Intro", "#intro", "doc.html"))
    b = index.get_or_create(SectionKey("Intro", "#intro", "doc.html"))
    assert a is b
    assert len(index) == 1


def test_key_identity_uses_all_fields():
    index = SectionIndex()
    index.append(SectionKey("Intro", "#intro", "a.html"), "one")
    index.append(SectionKey("Intro", "#intro", "b.html"), "two")
    index.append(SectionKey("Intro", "#other", "a.html"), "three")
    index.append(SectionKey("Intro", "#intro", "a.html"), "four")
    assert len(index) == 3
    assert index.blocks(SectionKey("Intro", "#intro", "a.html")) == ["one", "four"]


def test_entries_join_blocks_and_build_url():
    index = SectionIndex()
    page = SectionKey("Guide", "", "guide/index.html")
    sect = SectionKey("Setup", "#_setup", "guide/index.html")
    index.get_or_create(page)
    index.append(sect, "Download it.")
    index.append(sect, "Unzip it.")
    assert index.entries() == [
        IndexEntry(title="Guide", url="guide/index.html", content=""),
        IndexEntry(title="Setup", url="guide/index.html#_setup", content="Download it. Unzip it."),
    ]


def test_blocks_of_unknown_key_is_empty():
    index = SectionIndex()
    key = SectionKey("x", "", "y")
    assert index.blocks(key) == []
    assert key not in index
