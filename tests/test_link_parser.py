from markdown_link_checker.link_parser import extract_links


def test_duplicate_targets_collapse_to_one():
    text = "[a](https://x.test/1) and [b](https://x.test/1)"
    assert extract_links(text) == ["https://x.test/1"]


def test_first_seen_order_is_kept():
    text = (
        "[one](https://b.test/) [two](http://a.test/) "
        "[three](https://b.test/) [four](https://c.test/) [five](http://a.test/)"
    )
    assert extract_links(text) == ["https://b.test/", "http://a.test/", "https://c.test/"]


def test_extraction_is_idempotent():
    text = "See [docs](https://docs.test/guide) and [home](https://home.test)."
    first = extract_links(text)
    assert extract_links(text) == first
    assert extract_links(" ".join(f"[x]({u})" for u in first)) == first


def test_non_http_schemes_and_relative_paths_are_ignored():
    text = (
        "[mail](mailto:someone@example.com) [ftp](ftp://files.test/a) "
        "[rel](./docs/readme.md) [anchor](#section) [ok](https://ok.test/)"
    )
    assert extract_links(text) == ["https://ok.test/"]


def test_bare_urls_are_ignored():
    assert extract_links("Visit https://bare.test/ or <https://angle.test/>") == []


def test_query_strings_are_preserved():
    text = "[search](https://s.test/find?q=a&page=2#top)"
    assert extract_links(text) == ["https://s.test/find?q=a&page=2#top"]


def test_destination_with_whitespace_is_not_a_link():
    assert extract_links('[t](https://x.test/a "title")') == []


def test_close_paren_ends_destination():
    text = "[wiki](https://w.test/Foo_(bar))"
    assert extract_links(text) == ["https://w.test/Foo_(bar"]


def test_empty_label_is_not_a_link():
    assert extract_links("[](https://x.test/)") == []


def test_uppercase_scheme_is_not_matched():
    assert extract_links("[x](HTTPS://x.test/)") == []


def test_no_links_yields_empty_list():
    assert extract_links("# Title\n\nJust prose, no links.\n") == []
    assert extract_links("") == []


def test_links_across_lines_and_lists():
    text = "\n".join([
        "# Resources",
        "* [Alpha](https://alpha.test) - first",
        "* [Beta](http://beta.test/path) - second",
        "  * [Alpha again](https://alpha.test)",
    ])
    assert extract_links(text) == ["https://alpha.test", "http://beta.test/path"]
