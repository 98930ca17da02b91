"""
Srcset candidate rewriting.

A srcset is a comma-separated list of 'url descriptor' pairs, e.g.
'a-300.jpg 300w, a-600.jpg 600w'. Rewriting only ever touches the URL.
"""

from dataclasses import dataclass, replace
from typing import List

from imagecdn.service.query import append_query
from imagecdn.service.transform import transform_image_url


@dataclass(frozen=True)
class SrcsetCandidate:
    url: str
    descriptor: str = ''

    def __str__(self):
        return f'{self.url} {self.descriptor}'.strip()


def rewrite_candidates(candidates, query_string) -> List[SrcsetCandidate]:
    """Append a serialized query to every candidate URL."""
    return [replace(c, url=append_query(c.url, query_string)) for c in candidates or []]


def transform_candidates(candidates, config=None) -> List[SrcsetCandidate]:
    """Run every candidate URL through transform_image_url()."""
    return [
        replace(c, url=transform_image_url(c.url, config=config)) if c.url else c
        for c in candidates or []
    ]


def parse_srcset(srcset) -> List[SrcsetCandidate]:
    """Parse a srcset attribute value into candidates."""
    candidates = []
    for part in (srcset or '').split(','):
        item = part.strip()
        if not item:
            continue
        tokens = item.split()
        candidates.append(SrcsetCandidate(url=tokens[0], descriptor=' '.join(tokens[1:])))
    return candidates


def format_srcset(candidates):
    """Serialize candidates back into a srcset attribute value."""
    return ', '.join(str(c) for c in candidates)
