"""Legal text the user must accept to create an account.

The Terms of Use body ships as a package resource (terms_of_use.txt).
Paragraphs are separated by three newlines and lines within a paragraph by
one; the terms screen relies on that structure for layout.
"""

from importlib.resources import files

from verbiage.catalog import ResourceTable, text

__all__ = ["TERMS_OF_USE"]

_TERMS_OF_USE_TEXT = (
    files("verbiage.content").joinpath("terms_of_use.txt").read_text(encoding="utf-8")
)

TERMS_OF_USE = ResourceTable(
    "terms-of-use",
    {
        "terms-of-use": text(
            "The Terms of Use for Prima-Temp products. User must accept these terms to "
            "create an account.",
            en=_TERMS_OF_USE_TEXT,
        ),
    },
)
