"""HTML minification with fixed, conservative settings."""

import htmlmin

# Whitespace runs collapse to one character instead of disappearing, comments
# stay, attribute quotes stay so the stylesheet marker still matches.
MINIFY_OPTIONS = {
    "remove_comments": False,
    "remove_empty_space": False,
    "remove_all_empty_space": False,
    "reduce_empty_attributes": True,
    "reduce_boolean_attributes": False,
    "remove_optional_attribute_quotes": False,
    "convert_charrefs": True,
    "keep_pre": False,
    "pre_tags": ("pre", "textarea"),
}


def minify_html(content: str) -> str:
    return htmlmin.minify(content, **MINIFY_OPTIONS)
