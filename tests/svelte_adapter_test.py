import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from stylelens.svelte_adapter import SvelteAdapter, expression_spans
from stylelens.errors import ParseError
from stylelens.models import ComponentDocument, Dialect, SourceRange

SAMPLE_SVELTE = """<script>
  let active = false;
  const obj = { a: '}' };
</script>

<div class="btn primary">
  {#if active}
    <button class="primary btn" on:click={() => (active = !active)}>Go</button>
  {/if}
  <span class="label {active ? 'on' : 'off'}" style="color: red">x</span>
  <span class={dynamic} style="color: {c}">y</span>
</div>

<style>
  .btn { color: red; }
</style>
"""


def document(text, file_id='src/Button.svelte'):
    return ComponentDocument(file_id, Dialect.SVELTE, text)


def test_static_class_usages():
    usages, _ = SvelteAdapter().extract_usages(document(SAMPLE_SVELTE))
    assert [usage.class_string for usage in usages] == ['btn primary', 'btn primary']
    assert usages[1].raw_value == 'primary btn'
    assert usages[0].location == SourceRange('src/Button.svelte', 5, 12, 5, 23)
    assert usages[0].attribute_range == SourceRange('src/Button.svelte', 5, 5, 5, 24)


def test_static_inline_style():
    _, inline_styles = SvelteAdapter().extract_usages(document(SAMPLE_SVELTE))
    assert [style.style_string for style in inline_styles] == ['color: red']


def test_expression_spans_skip_script_and_style():
    spans = expression_spans(document(SAMPLE_SVELTE))
    texts = [SAMPLE_SVELTE[start:end] for start, end in spans]
    assert texts[0] == '{#if active}'
    assert '{ a: \'}\' }' not in texts
    assert "{active ? 'on' : 'off'}" in texts


def test_unclosed_brace_is_parse_error():
    with pytest.raises(ParseError):
        SvelteAdapter().extract_usages(document('<div class="a">{#if x</div>\n'))


def test_unterminated_tag_is_parse_error():
    with pytest.raises(ParseError):
        SvelteAdapter().extract_usages(document('<div class="a"\n'))


def test_unmatched_end_tag_is_parse_error():
    with pytest.raises(ParseError):
        SvelteAdapter().extract_usages(document('<p class="a"><div class="btn">x</div></p>\n'))
