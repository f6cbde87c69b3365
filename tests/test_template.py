import pytest

from railway_report.errors import CyclicReferenceError, ResourceNotFoundError
from railway_report.resources import ResourceStore
from railway_report.template import TemplateResolver, placeholder, replace_placeholders


def resolver(**contents) -> TemplateResolver:
    return TemplateResolver(ResourceStore({name.replace("_", "."): text for name, text in contents.items()}))


#============================================
def test_reference_expanded_with_trimmed_name() -> None:
    r = resolver(a_txt="A")
    assert r.replace_references("x{{ a.txt }}y{{a.txt}}z") == "xAyAz"


#============================================
def test_nested_references() -> None:
    r = resolver(outer_txt="[{{ inner.txt }}]", inner_txt="in")
    assert r.replace_references("<{{ outer.txt }}>") == "<[in]>"


#============================================
def test_repeated_reference_spliced_at_each_offset() -> None:
    """
    The same reference text twice expands both occurrences in place.
    """
    r = resolver(item_txt="{{ leaf.txt }}!", leaf_txt="L")
    assert r.replace_references("1{{ item.txt }}2{{ item.txt }}3") == "1L!2L!3"


#============================================
def test_text_without_references_unchanged() -> None:
    r = resolver()
    assert r.replace_references("plain {single} braces") == "plain {single} braces"


#============================================
def test_unterminated_reference_left_alone() -> None:
    r = resolver()
    assert r.replace_references("open {{ never closed") == "open {{ never closed"


#============================================
def test_missing_resource_fails_whole_expansion() -> None:
    r = resolver(outer_txt="{{ gone.txt }}")
    with pytest.raises(ResourceNotFoundError) as excinfo:
        r.replace_references("{{ outer.txt }}")
    assert excinfo.value.name == "gone.txt"


#============================================
def test_self_reference_fails_fast() -> None:
    r = resolver(loop_txt="again {{ loop.txt }}")
    with pytest.raises(CyclicReferenceError) as excinfo:
        r.replace_references("{{ loop.txt }}")
    assert excinfo.value.chain == ["loop.txt", "loop.txt"]


#============================================
def test_indirect_cycle_fails_fast() -> None:
    r = resolver(a_txt="{{ b.txt }}", b_txt="{{ a.txt }}")
    with pytest.raises(CyclicReferenceError):
        r.replace_references("{{ a.txt }}")


#============================================
def test_expansion_is_idempotent() -> None:
    contents = {"page.html": "<{{ head.html }}|{{ body.html }}>", "head.html": "H", "body.html": "B{{ head.html }}"}
    first = TemplateResolver(ResourceStore(contents)).replace_references("{{ page.html }}")
    second = TemplateResolver(ResourceStore(contents)).replace_references("{{ page.html }}")
    assert first == second == "<H|BH>"


#============================================
def test_replace_placeholders_globally() -> None:
    text = "((% title %)) - ((% title %)) ((% other %))"
    assert replace_placeholders(text, {"title": "T"}) == "T - T ((% other %))"


#============================================
def test_placeholder_values_not_rescanned() -> None:
    """
    A value that looks like a placeholder is inserted verbatim.
    """
    text = "((% a %))|((% b %))"
    result = replace_placeholders(text, {"a": placeholder("b"), "b": "B"})
    assert result == "((% b %))|B"


#============================================
def test_placeholder_requires_exact_spacing() -> None:
    assert replace_placeholders("((%title%))", {"title": "T"}) == "((%title%))"


#============================================
def test_render_expands_then_substitutes() -> None:
    r = resolver(page_html="<h1>((% title %))</h1>{{ part.html }}", part_html="<p>((% title %))</p>")
    assert r.render("page.html", {"title": "Hi"}) == "<h1>Hi</h1><p>Hi</p>"
