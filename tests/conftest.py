"""Shared fixtures for consentdoc tests."""

import pytest

MIXED_CONTENT = """\
Hello *there* :)
<toggle id=toggle1 initial-value=true expected-value=false>Prompt1</toggle>
<toggle id=toggle2 initial-value=false expected-value=true>Prompt2</>
<toggle id=toggle3 expected-value=true>Prompt3</>
some more markdown
<select id=select1 initial-value=option1>
    Please select your preference
    <option id=option1>Option1</>
    <option id=option2>Option2</>
</select>
even more mark down
<signature id=sig1></signature>"""

FRONTMATTER_DOCUMENT = """\
---
title: abc
version: 1.0.2
keyOnlyEntry:
keyAndValueEntry: value
---

First markdown block
- abc
- def"""


@pytest.fixture
def mixed_content() -> str:
    """Markdown interleaved with toggles, a select and a signature."""
    return MIXED_CONTENT


@pytest.fixture
def frontmatter_document() -> str:
    return FRONTMATTER_DOCUMENT

