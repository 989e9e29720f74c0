import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from stylelens.vue_adapter import VueAdapter
from stylelens.errors import ParseError
from stylelens.models import ComponentDocument, Dialect, SourceRange

SAMPLE_VUE = """<template>
  <div class="card  p-4" :style="{ fontSize: 14, color: 'red' }">
    <p class="p-4 card">{{ count < 3 ? 'low' : 'high' }}</p>
    <span :class="{ active: isActive }" style="margin: 0; color: blue">x</span>
    <span :style="styles" class="">y</span>
  </div>
</template>

<script setup>
const count = 1
const styles = { color: 'red' }
</script>

<style scoped>
.card { color: red; }
</style>
"""


def extract(text, file_id='src/Card.vue'):
    return VueAdapter().extract_usages(ComponentDocument(file_id, Dialect.VUE, text))


def test_static_class_usages():
    usages, _ = extract(SAMPLE_VUE)
    assert [usage.class_string for usage in usages] == ['card p-4', 'card p-4']
    assert usages[0].raw_value == 'card  p-4'
    assert usages[0].attribute_name == 'class'
    assert usages[0].location == SourceRange('src/Card.vue', 1, 14, 1, 23)
    assert usages[0].attribute_range == SourceRange('src/Card.vue', 1, 7, 1, 24)


def test_inline_styles():
    _, inline_styles = extract(SAMPLE_VUE)
    assert [style.style_string for style in inline_styles] == [
        'color: red; font-size: 14px',
        'color: blue; margin: 0',
    ]
    assert inline_styles[0].attribute_name == ':style'
    assert inline_styles[1].attribute_name == 'style'


def test_v_bind_style():
    vue = '<template>\n  <p v-bind:style="{ marginTop: \'4px\' }">x</p>\n</template>\n'
    _, inline_styles = extract(vue)
    assert inline_styles[0].style_string == 'margin-top: 4px'
    assert inline_styles[0].attribute_name == 'v-bind:style'


def test_only_template_block_is_read():
    vue = '<script>\nexport default {}\n</script>\n<style>\n.x { color: red; }\n</style>\n'
    assert extract(vue) == ([], [])


def test_non_html_template_is_skipped():
    vue = '<template lang="pug">\ndiv(class="card")\n</template>\n'
    assert extract(vue) == ([], [])


def test_parse_error():
    with pytest.raises(ParseError):
        extract('<template>\n  <div class="card"\n</template>\n')


def test_block_inside_paragraph_is_read():
    usages, _ = extract('<template>\n  <p class="a"><div class="btn">x</div></p>\n</template>\n')
    assert [usage.class_string for usage in usages] == ['a', 'btn']
    assert usages[1].location == SourceRange('src/Card.vue', 1, 27, 1, 30)
