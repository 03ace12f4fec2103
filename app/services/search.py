"""
Text search and tag matching over the normalized search column.

Each searchable row keeps a ``search_document`` column: the lowercased words of
its name, description and tags, space-separated with a leading and trailing
space. PostgreSQL searches it with to_tsvector/to_tsquery (english stemming,
ts_rank relevance); other dialects match whole words with LIKE and rank by the
number of words matched.
"""

import json
import re
from collections.abc import Iterable, Sequence

from sqlalchemy import String, case, cast, false, func, literal, or_
from sqlalchemy.dialects.postgresql import JSONB, array
from sqlalchemy.sql import ColumnElement
from sqlalchemy.sql.expression import type_coerce

SEARCH_CONFIG = "english"

_WORD_RE = re.compile(r"[^\W_]+", re.UNICODE)


def search_words(text: str | None) -> list[str]:
    """Split text into lowercase alphanumeric words ('primary-blue' -> ['primary', 'blue'])."""
    if not text:
        return []
    return _WORD_RE.findall(text.lower())


def build_search_document(name: str | None, description: str | None, tags: Iterable[str] | None) -> str:
    words: list[str] = []
    words.extend(search_words(name))
    words.extend(search_words(description))
    for tag in tags or ():
        words.extend(search_words(tag))
    return " " + " ".join(words) + " " if words else ""


def text_match(column: ColumnElement, query: str, dialect: str) -> tuple[ColumnElement, ColumnElement]:
    """
    Return (filter clause, relevance expression) for a free-text query.

    Any query word may match. A query with no words matches nothing.
    """
    terms = list(dict.fromkeys(search_words(query)))
    if not terms:
        return false(), literal(0)
    if dialect == "postgresql":
        vector = func.to_tsvector(SEARCH_CONFIG, column)
        tsquery = func.to_tsquery(SEARCH_CONFIG, " | ".join(terms))
        return vector.op("@@")(tsquery), func.ts_rank(vector, tsquery)
    matches = [column.contains(f" {term} ", autoescape=True) for term in terms]
    relevance = sum(case((m, 1), else_=0) for m in matches)
    return or_(*matches), relevance


def tags_match_any(column: ColumnElement, tags: Sequence[str], dialect: str) -> ColumnElement:
    """Clause matching rows whose JSON tag list contains at least one of ``tags`` exactly."""
    if not tags:
        return false()
    if dialect == "postgresql":
        return type_coerce(column, JSONB).has_any(array(list(tags)))
    # JSON is stored as serialized text; an element matches as its quoted JSON string.
    return or_(*(cast(column, String).contains(json.dumps(tag), autoescape=True) for tag in tags))
