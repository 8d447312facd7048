from __future__ import annotations

from app.services import jsonld


def _script(body: str, attrs: str = 'type="application/ld+json"') -> str:
    return f"<script {attrs}>{body}</script>"


def test_scanner_yields_payloads_in_document_order():
    html = "<html><head>" + _script('{"a": 1}') + "</head><body>" + _script('{"b": 2}') + "</body></html>"

    assert list(jsonld.iter_jsonld_payloads(html)) == ['{"a": 1}', '{"b": 2}']


def test_scanner_is_restartable():
    html = _script("[1]") + _script("[2]")

    first = list(jsonld.iter_jsonld_payloads(html))
    second = list(jsonld.iter_jsonld_payloads(html))

    assert first == second == ["[1]", "[2]"]


def test_scanner_ignores_other_script_types():
    html = (
        "<script>var x = 1;</script>"
        + _script("{}", attrs='type="text/javascript"')
        + _script('{"ok": true}')
    )

    assert list(jsonld.iter_jsonld_payloads(html)) == ['{"ok": true}']


def test_scanner_tolerates_attribute_order_case_and_quotes():
    html = (
        _script("[1]", attrs='id="schema" TYPE="Application/LD+JSON" class="yoast"')
        + _script("[2]", attrs="data-x='1' type='application/ld+json'")
        + _script("[3]", attrs="type=application/ld+json")
    )

    assert list(jsonld.iter_jsonld_payloads(html)) == ["[1]", "[2]", "[3]"]


def test_scanner_does_not_match_data_type_attribute():
    html = _script("[1]", attrs='data-type="application/ld+json"')

    assert list(jsonld.iter_jsonld_payloads(html)) == []


def test_scanner_handles_multiline_payloads():
    body = '\n  {\n    "@type": "Recipe",\n    "name": "Soup"\n  }\n'
    html = "<SCRIPT type=\"application/ld+json\">" + body + "</SCRIPT >"

    assert list(jsonld.iter_jsonld_payloads(html)) == [body]


def test_unterminated_script_runs_to_next_close_tag_and_decodes_to_nothing():
    html = '<script type="application/ld+json">{"@type": "Recipe"' + _script('{"name": "next"}')

    payloads = list(jsonld.iter_jsonld_payloads(html))

    assert payloads == ['{"@type": "Recipe"<script type="application/ld+json">{"name": "next"}']
    assert jsonld.decode_payload(payloads[0]) == []
    assert list(jsonld.iter_candidates(html)) == []


def test_script_text_inside_payload_is_kept():
    body = '{"@type": "Recipe", "name": "X", "description": "embed with <script src=a.js>"}'
    html = _script(body) + _script('{"@type": "WebPage"}')

    assert list(jsonld.iter_jsonld_payloads(html)) == [body, '{"@type": "WebPage"}']
    assert jsonld.select_recipe(jsonld.iter_candidates(html))["name"] == "X"


def test_type_text_inside_other_attribute_value_is_ignored():
    html = (
        _script("[1]", attrs='data-note=" type=application/ld+json" type="text/template"')
        + _script("[2]", attrs="title='type=application/ld+json'")
        + _script("[3]", attrs='data-note="type=text/plain" type="application/ld+json"')
    )

    assert list(jsonld.iter_jsonld_payloads(html)) == ["[3]"]


def test_scanner_on_empty_input():
    assert list(jsonld.iter_jsonld_payloads("")) == []
    assert list(jsonld.iter_jsonld_payloads(None)) == []


def test_decode_payload_trims_and_parses():
    assert jsonld.decode_payload('  \n {"a": [1, 2]} \n') == [{"a": [1, 2]}]
    assert jsonld.decode_payload("[1, 2]") == [[1, 2]]


def test_decode_payload_failure_yields_nothing():
    assert jsonld.decode_payload('{"@type":') == []
    assert jsonld.decode_payload("") == []
    assert jsonld.decode_payload("<!-- not json -->") == []


def test_flatten_single_object():
    obj = {"@type": "Recipe"}

    assert jsonld.flatten_items(obj) == [obj]


def test_flatten_array_of_objects():
    a, b = {"@type": "WebSite"}, {"@type": "Recipe"}

    assert jsonld.flatten_items([a, b]) == [a, b]


def test_flatten_graph_discards_container():
    a, b = {"@type": "Organization"}, {"@type": "Recipe"}
    doc = {"@context": "https://schema.org", "@graph": [a, b]}

    assert jsonld.flatten_items(doc) == [a, b]


def test_flatten_graph_inside_array():
    a, b, c = {"@type": "A"}, {"@type": "B"}, {"@type": "C"}

    assert jsonld.flatten_items([{"@graph": [a, b]}, c]) == [a, b, c]


def test_flatten_non_array_graph_keeps_item():
    doc = {"@graph": {"@type": "Recipe"}}

    assert jsonld.flatten_items(doc) == [doc]


def test_flatten_scalars_pass_through():
    assert jsonld.flatten_items("text") == ["text"]
    assert jsonld.flatten_items(None) == [None]


def test_candidates_cross_blocks_in_order_and_skip_bad_json():
    html = (
        _script('{"@graph": [{"@type": "A"}, {"@type": "B"}]}')
        + _script("{broken")
        + _script('[{"@type": "C"}]')
    )

    types = [c["@type"] for c in jsonld.iter_candidates(html)]

    assert types == ["A", "B", "C"]


def test_select_recipe_returns_first_match():
    first = {"@type": "Recipe", "name": "first"}
    second = {"@type": "Recipe", "name": "second"}

    assert jsonld.select_recipe([{"@type": "WebPage"}, "x", 3, first, second]) is first


def test_select_recipe_type_match_is_exact():
    assert jsonld.select_recipe([{"@type": "recipe"}, {"@type": "Recipes"}]) is None


def test_select_recipe_array_type_is_not_matched():
    # Known boundary: multi-typed nodes are not treated as recipes.
    assert jsonld.select_recipe([{"@type": ["Recipe", "Article"], "name": "X"}]) is None


def test_select_recipe_none_when_empty():
    assert jsonld.select_recipe([]) is None


def test_select_recipe_stops_consuming_after_match():
    consumed = []

    def gen():
        for item in ({"@type": "Recipe"}, {"@type": "Other"}):
            consumed.append(item["@type"])
            yield item

    jsonld.select_recipe(gen())

    assert consumed == ["Recipe"]
