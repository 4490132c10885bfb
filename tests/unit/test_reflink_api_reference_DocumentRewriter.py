"""Unit tests for DocumentRewriter."""

import re
import xml.etree.ElementTree as etree

import pytest

from reflink.api.reference.DocumentRewriter import DocumentRewriter, is_reference_link
from reflink.api.reference.ReferenceCache import ReferenceCache

pytestmark = pytest.mark.reference

MR_URL = "https://git.example.com/group/proj/merge_requests/42"
ISSUE_URL = "https://git.example.com/group/proj/issues/5"


def _rewrite(store, project, reference_type, markup, **kwargs):
    root = etree.fromstring(markup)
    rewriter = DocumentRewriter(reference_type, store, project, **kwargs)
    rewriter.rewrite(root)
    return root, rewriter


def _links(root):
    return list(root.iter("a"))


class TestTextNodes:
    def test_text_without_references_is_unchanged(self, store, project, merge_request_type):
        markup = "<p>plain text, no refs</p>"
        root, rewriter = _rewrite(store, project, merge_request_type, markup)

        assert etree.tostring(root, encoding="unicode") == markup
        assert rewriter.rendered == 0

    def test_reference_in_running_text(self, store, project, merge_request_type):
        root, rewriter = _rewrite(store, project, merge_request_type, "<p>see !42 for details</p>")

        assert root.text == "see "
        (link,) = _links(root)
        assert link.text == "!42"
        assert link.tail == " for details"
        assert link.get("href") == MR_URL
        assert link.get("class") == "gfm gfm-merge_request"
        assert link.get("title") == "Merge Request: Add <b> & widgets"
        assert rewriter.rendered == 1

    def test_unresolved_reference_is_unchanged(self, store, project, merge_request_type):
        markup = "<p>see !43 for details</p>"
        root, _ = _rewrite(store, project, merge_request_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_mixed_resolved_and_unresolved(self, store, project, merge_request_type):
        root, rewriter = _rewrite(store, project, merge_request_type, "<p>!43 then !42 then !44</p>")

        assert root.text == "!43 then "
        (link,) = _links(root)
        assert link.tail == " then !44"
        assert rewriter.rendered == 1

    def test_reference_in_tail(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, "<p><em>x</em> and !42.</p>")

        em, link = list(root)
        assert em.tail == " and "
        assert link.tag == "a"
        assert link.text == "!42"
        assert link.tail == "."

    def test_several_references_keep_order(self, store, project, issue_type):
        root, rewriter = _rewrite(store, project, issue_type, "<p>#10, #5 and #10</p>")

        assert [a.text for a in _links(root)] == ["#10", "#5", "#10"]
        assert "".join(root.itertext()) == "#10, #5 and #10"
        assert rewriter.rendered == 3

    def test_note_anchor_renders_comment_suffix(self, store, project, issue_type):
        root, _ = _rewrite(store, project, issue_type, "<p>see #10#note_7</p>")
        (link,) = _links(root)
        assert link.text == "#10 (comment 7)"
        assert link.get("data-original") == "#10#note_7"

    def test_foreign_project_reference(self, store, project, issue_type):
        root, _ = _rewrite(store, project, issue_type, "<p>upstream other/lib#3</p>")
        (link,) = _links(root)
        assert link.text == "other/lib#3"
        assert link.get("data-project") == "2"
        assert link.get("data-issue") == "203"

    @pytest.mark.parametrize("tag", ["pre", "code", "style"])
    def test_ignored_ancestors(self, store, project, merge_request_type, tag):
        markup = f"<div><{tag}><span>!42</span></{tag}></div>"
        root, _ = _rewrite(store, project, merge_request_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_text_after_ignored_element_is_scanned(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, "<p><code>!42</code> and !42</p>")

        code, link = list(root)
        assert code.text == "!42"
        assert link.text == "!42"

    def test_blockquotes_scanned_by_default(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, "<div><blockquote><p>!42</p></blockquote></div>")
        assert len(_links(root)) == 1

    def test_blockquotes_ignored_when_requested(self, store, project, merge_request_type):
        root, _ = _rewrite(
            store, project, merge_request_type, "<div><blockquote><p>!42</p></blockquote></div>", ignore_blockquotes=True
        )
        assert _links(root) == []

    def test_comments_are_skipped(self, store, project, merge_request_type):
        root = etree.Element("div")
        root.append(etree.Comment("!42"))
        DocumentRewriter(merge_request_type, store, project).rewrite(root)
        assert _links(root) == []


class TestLinkElements:
    def test_short_reference_href_keeps_link_text(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, '<p><a href="!42">the fix</a> landed</p>')

        (link,) = _links(root)
        assert link.get("href") == MR_URL
        assert link.text == "the fix"
        assert link.tail == " landed"
        assert link.get("data-original") == "the fix"

    def test_percent_encoded_href_is_decoded(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, '<p><a href="%2142">the fix</a></p>')
        (link,) = _links(root)
        assert link.get("href") == MR_URL

    def test_pasted_url_is_replaced(self, store, project, issue_type):
        markup = f'<p><a href="{ISSUE_URL}">{ISSUE_URL}</a></p>'
        root, _ = _rewrite(store, project, issue_type, markup)

        (link,) = _links(root)
        assert link.text == "#5"
        assert link.get("href") == ISSUE_URL
        assert link.get("class") == "gfm gfm-issue"
        assert link.get("data-original") == ISSUE_URL

    def test_pasted_url_with_note_anchor(self, store, project, issue_type):
        url = f"{ISSUE_URL}#note_3"
        root, _ = _rewrite(store, project, issue_type, f'<p><a href="{url}">{url}</a></p>')
        (link,) = _links(root)
        assert link.text == "#5 (comment 3)"
        assert link.get("href") == url

    def test_named_link_to_object_url(self, store, project, issue_type):
        root, _ = _rewrite(store, project, issue_type, f'<p>read <a href="{ISSUE_URL}">this issue</a>.</p>')

        (link,) = _links(root)
        assert root.text == "read "
        assert link.text == "this issue"
        assert link.tail == "."
        assert link.get("data-issue") == "105"

    def test_link_with_markup_inside_uses_full_text(self, store, project, issue_type):
        root, _ = _rewrite(store, project, issue_type, f'<p><a href="{ISSUE_URL}">the <em>slow</em> one</a></p>')
        (link,) = _links(root)
        assert link.text == "the slow one"
        assert list(link) == []

    def test_unrelated_link_is_unchanged(self, store, project, merge_request_type):
        markup = '<p><a href="https://example.org/">!42</a></p>'
        root, _ = _rewrite(store, project, merge_request_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_link_to_missing_object_is_unchanged(self, store, project, issue_type):
        url = "https://git.example.com/group/proj/issues/99"
        markup = f'<p><a href="{url}">{url}</a></p>'
        root, _ = _rewrite(store, project, issue_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_empty_href_is_skipped(self, store, project, merge_request_type):
        markup = '<p><a href="">!42</a></p>'
        root, _ = _rewrite(store, project, merge_request_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_rendered_links_are_skipped(self, store, project, merge_request_type):
        markup = '<p><a href="!42" class="gfm">old</a></p>'
        root, _ = _rewrite(store, project, merge_request_type, markup)
        assert etree.tostring(root, encoding="unicode") == markup

    def test_type_without_link_grammar_skips_urls(self, store, project, issue_type):
        from dataclasses import replace

        from reflink.api.reference.ReferencePattern import ReferencePattern

        short_only = replace(issue_type, patterns=ReferencePattern(short=issue_type.patterns.short, link=None))
        markup = f'<p><a href="{ISSUE_URL}">{ISSUE_URL}</a></p>'
        root, _ = _rewrite(store, project, short_only, markup)
        assert etree.tostring(root, encoding="unicode") == markup


class TestRewriteContract:
    def test_no_ambient_project_is_noop(self, store, merge_request_type):
        markup = "<p>see !42</p>"
        root, rewriter = _rewrite(store, None, merge_request_type, markup)

        assert etree.tostring(root, encoding="unicode") == markup
        assert rewriter.rendered == 0
        assert sum(store.calls.values()) == 0

    def test_rewrite_is_idempotent(self, store, project, issue_type):
        markup = f'<div><p>#10 and other/lib#3</p><p><a href="{ISSUE_URL}">{ISSUE_URL}</a></p></div>'
        root, _ = _rewrite(store, project, issue_type, markup)
        once = etree.tostring(root, encoding="unicode")

        again = DocumentRewriter(issue_type, store, project)
        again.rewrite(root)

        assert etree.tostring(root, encoding="unicode") == once
        assert again.rendered == 0

    def test_find_object_called_once_per_reference_with_cache(self, store, project, merge_request_type):
        _rewrite(store, project, merge_request_type, "<p>!42 !42 <b>!42</b> !42</p>", cache=ReferenceCache())

        assert store.calls["find_object"] == 1
        assert store.calls["url_for"] == 1

    def test_without_cache_every_reference_hits_store(self, store, project, merge_request_type):
        _rewrite(store, project, merge_request_type, "<p>!42 !42 !42</p>")
        assert store.calls["find_object"] == 3

    def test_text_after_new_link_is_not_scanned_again(self, store, project, merge_request_type):
        root, rewriter = _rewrite(store, project, merge_request_type, "<p>!42 then !43</p>")

        assert store.calls["find_object"] == 2
        assert rewriter.rendered == 1
        assert _links(root)[0].tail == " then !43"

    def test_left_context_comes_from_original_text(self, store, project, issue_type):
        from dataclasses import replace

        from reflink.api.reference.ReferencePattern import ReferencePattern

        standalone = replace(
            issue_type,
            patterns=ReferencePattern(short=re.compile(r"(?<!\w)#(?P<issue>\d+)"), link=None),
        )
        root, rewriter = _rewrite(store, project, standalone, "<p>#10#5 and x#5</p>")

        links = _links(root)
        assert rewriter.rendered == 1
        assert len(links) == 1
        assert links[0].tail == "#5 and x#5"

    def test_cache_shared_across_types(self, store, project, issue_type, merge_request_type):
        cache = ReferenceCache()
        root = etree.fromstring("<p>other/lib#3 other/lib!1</p>")
        DocumentRewriter(issue_type, store, project, cache=cache).rewrite(root)
        DocumentRewriter(merge_request_type, store, project, cache=cache).rewrite(root)

        assert store.calls["find_project"] == 1

    def test_no_original_data(self, store, project, merge_request_type):
        root, _ = _rewrite(store, project, merge_request_type, "<p>!42</p>", no_original_data=True)
        (link,) = _links(root)
        assert link.get("data-original") is None

    def test_is_reference_link(self):
        assert is_reference_link(etree.fromstring('<a class="gfm gfm-issue" href="x">y</a>'))
        assert not is_reference_link(etree.fromstring('<a class="gfmx" href="x">y</a>'))
        assert not is_reference_link(etree.fromstring('<span class="gfm">y</span>'))


class TestLinkPieces:
    def test_object_link_filter(self, store, project, merge_request_type):
        rewriter = DocumentRewriter(merge_request_type, store, project, cache=ReferenceCache())
        html = rewriter.object_link_filter("see !42 and !43", merge_request_type.patterns.short)

        assert html.startswith(f'see <a href="{MR_URL}"')
        assert html.endswith(">!42</a> and !43")
        assert "Add &lt;b&gt; &amp; widgets" in html

    def test_link_pieces_without_project(self, store, merge_request_type):
        rewriter = DocumentRewriter(merge_request_type, store, None)
        assert rewriter.link_pieces("!42", merge_request_type.patterns.short) == ["!42"]
