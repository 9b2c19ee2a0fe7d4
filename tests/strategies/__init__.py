"""Hypothesis strategies for verbiage property-based testing.

Usage:
    from tests.strategies import content_keys, resource_tables
"""

import string

from hypothesis import event
from hypothesis import strategies as st

from verbiage.catalog import EntrySpec, ResourceTable, Static

__all__ = [
    "content_keys",
    "languages",
    "resource_tables",
    "static_texts",
    "table_names",
]

_KEY_CHARS = string.ascii_lowercase + string.digits + "-"


def content_keys() -> st.SearchStrategy[str]:
    """Kebab-case content keys such as 'complete-cycle'."""
    return st.builds(
        lambda first, rest: first + rest,
        st.sampled_from(string.ascii_lowercase),
        st.text(alphabet=_KEY_CHARS, max_size=20),
    )


def languages() -> st.SearchStrategy[str]:
    return st.sampled_from(["en", "de", "lv", "fr"])


def static_texts() -> st.SearchStrategy[str]:
    """Non-blank display strings."""
    return st.text(min_size=1, max_size=40).filter(lambda s: s.strip())


def table_names() -> st.SearchStrategy[str]:
    return st.text(alphabet=string.ascii_lowercase + "-", min_size=1, max_size=12)


@st.composite
def resource_tables(draw: st.DrawFn, name: str | None = None) -> ResourceTable:
    """Static-only ResourceTable with 0-8 keys in 1-2 languages each."""
    table_name = name if name is not None else draw(table_names())
    keys = draw(st.lists(content_keys(), max_size=8, unique=True))
    rows: dict[str, EntrySpec] = {}
    for key in keys:
        langs = draw(st.lists(languages(), min_size=1, max_size=2, unique=True))
        rows[key] = EntrySpec(
            description=f"{key} description",
            entries={lang: Static(draw(static_texts())) for lang in langs},
        )
    event(f"table_size={len(rows)}")
    return ResourceTable(table_name, rows)
