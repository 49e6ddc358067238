import pytest

from fluent_element.core.context import Context, render_args
from fluent_element.core.period import Period


def test_root_context_text():
    assert str(Context.root("title")) == "title"


def test_root_passes_existing_context_through():
    ctx = Context("elt")
    assert Context.root(ctx) is ctx


def test_root_rejects_non_string():
    with pytest.raises(TypeError):
        Context.root(42)


def test_derive_appends_suffix_in_order():
    ctx = Context.root("title").derive("click").derive("send_keys", "x")
    assert str(ctx) == "title.click().send_keys(x)"


def test_render_args_joins_variadic_arguments():
    assert render_args(["a", "b", 3]) == "a, b, 3"
    assert render_args([]) == ""
    assert str(Context("elt").derive("send_keys", "a", "b")) == "elt.send_keys(a, b)"


def test_period_renders_inside_suffix():
    assert str(Context("elt").derive("within", Period.secs(2))) == "elt.within(secs(2))"


def test_siblings_are_independent():
    parent = Context("elt")
    first = parent.derive("click")
    second = parent.derive("submit")

    assert str(first) == "elt.click()"
    assert str(second) == "elt.submit()"
    assert str(parent) == "elt"
    assert first.parent is parent and second.parent is parent


def test_index_suffix():
    assert str(Context("form").derive("elements", "li").index(2)) == "form.elements(li)[2]"


def test_deep_chain_keeps_only_suffixes():
    nodes = [Context("root")]
    for _ in range(3000):
        nodes.append(nodes[-1].derive("click"))
    for node in nodes:
        str(node)

    leaf = nodes[-1]
    retained = sum(len(node._suffix) for node in nodes)
    assert retained == len(str(leaf))
    assert str(leaf).endswith(".click().click()")
    assert set(Context.__slots__) == {"_parent", "_suffix", "_operation"}


def test_operation_names_last_call():
    ctx = Context("list").derive("elements", "li")
    assert Context("root").operation == "root"
    assert ctx.operation == "elements"
    assert ctx.index(3).operation == "elements"
    assert ctx.index(3).derive("click").operation == "click"


def test_equality_with_strings():
    ctx = Context("elt").derive("click")
    assert ctx == "elt.click()"
    assert ctx == Context("elt").derive("click")
    assert hash(ctx) == hash("elt.click()")
