"""Logic for turning type names in rendered Markdown into links.

Names are found by the punctuation the table generators put in front of them
(``<em>Name`` and ``/Name``, with an optional nullable ``?`` in between), not
by parsing the Markdown, so the pass is a heuristic: prose that happens to
contain ``/Name`` is linked too.
"""

import re

IDENT_CHAR = r"[\w\\]"
PREFIX = r"(<em>\??|/\??)"


def rewrite_class_links(text: str, class_links: dict[str, str]) -> str:
    """Link every ``<em>Name``, ``<em>?Name`` and ``/Name`` occurrence.

    Longer names are substituted first so that ``Foo`` never claims part of
    ``FooBar``; a match must not be followed by another identifier character.
    """
    if not text:
        return ""
    for name in sorted(class_links, key=lambda n: (-len(n), n)):
        url = class_links[name]
        pattern = re.compile(PREFIX + re.escape(name) + r"(?!" + IDENT_CHAR + ")")
        text = pattern.sub(lambda m, n=name, u=url: f"{m.group(1)}[{n}]({u})", text)
    return text
