#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Template argument tokenizer.

``Name|first|key=value|{{Nested|x}}|[[Link|label]]`` is split on the pipes
that sit outside any nested ``{{ }}`` or ``[[ ]]`` pair, so nested template
arguments and piped link labels survive intact.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field


# -----------------------------------------------------------------------------

@dataclass
class ParsedArguments:
    raw: str
    positional: list[str] = field(default_factory=list)   # [0] is the template name
    named: dict[str, str] = field(default_factory=dict)
    keys: list[str] = field(default_factory=list)         # verbatim named keys, in order

    @property
    def name(self) -> str:
        return self.positional[0] if self.positional else ""

    def get(self, key: str, default: str = "") -> str:
        return self.named.get(key, default)

    def at(self, index: int, default: str = "") -> str:
        """Raw segment *index* (1-based, named segments included)."""
        if 0 < index < len(self.positional):
            return self.positional[index]
        return default

    def pick(self, key: str, index: int | None = None, default: str = "") -> str:
        """Named value for *key*, else un-named argument *index*, else *default*.

        Empty values count as absent.  A ``key=value`` segment never stands in
        for a positional argument.
        """
        value = self.named.get(key, "")
        if not value and index is not None:
            value = self.named.get(str(index), "")
        return value or default

    def pick_raw(
        self,
        key: str,
        index: int,
        reserved: frozenset[str] = frozenset(),
        default: str = "",
    ) -> str:
        """Named value for *key*, else raw segment *index*, else *default*.

        The raw segment is used even when it contains ``=``, unless its key
        is one of the template's own argument names in *reserved*.
        """
        value = self.named.get(key, "")
        if not value:
            segment = self.at(index)
            seg_key, eq, _ = segment.partition("=")
            if not (eq and seg_key.strip().lower() in reserved):
                value = segment
        return value or default

    def tail(self, start: int) -> str:
        """Segments from *start* onwards, re-joined with pipes."""
        return "|".join(self.positional[start:])


# -----------------------------------------------------------------------------

def _split_top_level(inner: str) -> list[str]:
    parts: list[str] = []
    buf: list[str] = []
    braces = brackets = 0
    i = 0
    n = len(inner)

    while i < n:
        pair = inner[i:i + 2]
        if pair == "{{":
            braces += 1
        elif pair == "}}" and braces:
            braces -= 1
        elif pair == "[[":
            brackets += 1
        elif pair == "]]" and brackets:
            brackets -= 1
        elif inner[i] == "|" and not braces and not brackets:
            parts.append("".join(buf).strip())
            buf = []
            i += 1
            continue
        else:
            buf.append(inner[i])
            i += 1
            continue
        buf.append(pair)
        i += 2

    tail = "".join(buf).strip()
    if tail or not parts:
        parts.append(tail)
    return parts


def parse_args(inner: str) -> ParsedArguments:
    """Tokenize the inside of a ``{{...}}`` call.

    Every segment after the name that contains ``=`` is a named argument,
    stored under both its verbatim key and the lowercased key; the rest are
    stored under their 1-based index.
    """
    args = ParsedArguments(raw=inner, positional=_split_top_level(inner))

    for index, part in enumerate(args.positional[1:], start=1):
        key, eq, value = part.partition("=")
        if eq:
            key = key.strip()
            value = value.strip()
            if key not in args.keys:
                args.keys.append(key)
            # Every spelling of the key must keep agreeing with its lowercase form
            for seen in args.keys:
                if seen.lower() == key.lower():
                    args.named[seen] = value
            args.named[key.lower()] = value
        else:
            args.named[str(index)] = part
    return args


# -----------------------------------------------------------------------------
