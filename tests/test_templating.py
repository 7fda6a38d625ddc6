import pytest

from synapse_docs.core.templating import TemplateRenderer


@pytest.fixture
def renderer():
    return TemplateRenderer()


def test_variable_substitution(renderer):
    assert renderer.render("Hello {{name}}!", {"name": "Synapse"}) == "Hello Synapse!"


def test_missing_variable_renders_empty(renderer):
    assert renderer.render("[{{missing}}]", {}) == "[]"
    assert renderer.render("[{{none}}]", {"none": None}) == "[]"


def test_non_string_values_use_str(renderer):
    assert renderer.render("{{n}} {{flag}}", {"n": 0, "flag": False}) == "0 False"


def test_values_are_html_escaped(renderer):
    result = renderer.render("{{x}}", {"x": '<script>alert("x")</script>'})
    assert "<script>" not in result
    assert "&lt;script&gt;" in result


def test_raw_filter_skips_escaping(renderer):
    assert renderer.render("{{x|raw}}", {"x": "<b>bold</b>"}) == "<b>bold</b>"


def test_conditional_keeps_body_when_truthy(renderer):
    template = "a{% if show %}B{% endif %}c"
    assert renderer.render(template, {"show": True}) == "aBc"
    assert renderer.render(template, {"show": [1]}) == "aBc"


def test_conditional_drops_body_when_falsy_or_missing(renderer):
    template = "a{% if show %}B{% endif %}c"
    assert renderer.render(template, {"show": False}) == "ac"
    assert renderer.render(template, {"show": []}) == "ac"
    assert renderer.render(template, {}) == "ac"


def test_conditional_spans_lines(renderer):
    template = "{% if show %}\nline one\nline two\n{% endif %}"
    assert renderer.render(template, {"show": 1}) == "\nline one\nline two\n"


def test_sequential_conditionals_are_independent(renderer):
    template = "{% if a %}A{% endif %}-{% if b %}B{% endif %}"
    assert renderer.render(template, {"a": True, "b": False}) == "A-"


def test_loop_repeats_body_per_item(renderer):
    template = "<ul>{% for item in items %}<li>{{item.name}}</li>{% endfor %}</ul>"
    context = {"items": [{"name": "one"}, {"name": "two"}]}
    assert renderer.render(template, context) == "<ul><li>one</li><li>two</li></ul>"


def test_loop_over_empty_or_missing_list(renderer):
    template = "[{% for item in items %}x{% endfor %}]"
    assert renderer.render(template, {"items": []}) == "[]"
    assert renderer.render(template, {}) == "[]"


def test_loop_fields_are_escaped_unless_raw(renderer):
    template = "{% for i in items %}{{i.v}}|{{i.v|raw}}{% endfor %}"
    assert renderer.render(template, {"items": [{"v": "<i>"}]}) == "&lt;i&gt;|<i>"


def test_loop_missing_field_renders_empty(renderer):
    template = "{% for i in items %}[{{i.nope}}]{% endfor %}"
    assert renderer.render(template, {"items": [{"v": 1}]}) == "[]"


def test_loop_reads_object_attributes(renderer):
    class Item:
        title = "attr"

    template = "{% for i in items %}{{i.title}}{% endfor %}"
    assert renderer.render(template, {"items": [Item()]}) == "attr"


def test_plain_variable_in_loop_body_uses_outer_context(renderer):
    template = "{% for item in items %}{{name}}:{{item.name}};{% endfor %}"
    context = {"name": "outer", "items": [{"name": "a"}, {"name": "b"}]}
    assert renderer.render(template, context) == "outer:a;outer:b;"


def test_conditional_inside_loop_uses_outer_context(renderer):
    template = "{% for item in items %}{% if flag %}Y{% endif %}{{item.n}}{% endfor %}"
    assert renderer.render(template, {"flag": False, "items": [{"n": 1}, {"n": 2}]}) == "12"


def test_registry(renderer):
    renderer.register("b", "B {{x}}")
    renderer.register("a", "A")

    assert renderer.names() == ["a", "b"]
    assert renderer.get("b") == "B {{x}}"
    assert renderer.render_named("b", {"x": 1}) == "B 1"

    renderer.register("b", "replaced")
    assert renderer.get("b") == "replaced"


def test_unknown_template_raises_key_error(renderer):
    with pytest.raises(KeyError):
        renderer.get("missing")


def test_template_without_tokens_is_unchanged(renderer):
    template = "<p>plain { text } with {braces} and % signs</p>"
    assert renderer.render(template, {"anything": 1}) == template


def test_loop_over_numbers(renderer):
    template = "{% for x in items %}{{x.n}},{% endfor %}"
    assert renderer.render(template, {"items": [{"n": 1}, {"n": 2}]}) == "1,2,"
