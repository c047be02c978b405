"""Help text for the search command."""

from __future__ import annotations


def build_search_help_text() -> str:
    """Return the search command epilog.

    Covers query syntax, fields, case sensitivity rules and examples. Each
    block starts with ``\\b`` so click keeps its line layout.
    """
    return """\b
QUERY SYNTAX
  Free text      machine learning       Search all fields (AND logic)
  Phrase         "machine learning"     Exact phrase match
  Field          author:Smith           Search specific field
  Field+Phrase   author:"John Smith"    Field with phrase

\b
FIELDS
  author, title, year, doi, pmid, pmcid, url, keyword, tag

\b
CASE SENSITIVITY
  Consecutive uppercase (2+ letters) is case-sensitive:
    AI    -> matches "AI therapy", not "ai therapy"
    RNA   -> matches "mRNA synthesis", not "mrna synthesis"
  Other text is case-insensitive:
    api   -> matches "API", "api", "Api"

\b
SORTING
  --sort relevance|published|updated|created|author|title
  aliases: rel, pub, mod, add

\b
EXAMPLES (single quotes keep phrase quotes away from the shell)
  $ refsearch search machine learning
  $ refsearch search author:Smith year:2020
  $ refsearch search '"machine learning"'
  $ refsearch search 'author:"John Smith"' title:introduction
  $ refsearch search tag:review --sort published --order desc
  $ refsearch search AI therapy
  $ refsearch search doi:10.1000/xyz123 --output json
"""
