"""Parse a consent form and walk its sections."""

from consentdoc import Markdown, Select, Signature, Toggle, parse

result = parse("""\
---
title: Study Consent
version: 1.0.0
---
Thank you for your interest in our study.
<toggle id=data-sharing expected-value=true>I agree to share my data</toggle>
<select id=contact>
    How may we contact you?
    <option id=email>Email</option>
    <option id=phone>Phone</option>
</select>
<signature id=sig />
""")

print(result.frontmatter.title, result.frontmatter.version)
for section in result.sections:
    match section:
        case Markdown(text=text):
            print("markdown:", text)
        case Toggle(id=toggle_id, prompt=prompt):
            print(f"toggle {toggle_id}:", prompt)
        case Select(id=select_id, options=options):
            print(f"select {select_id}:", [option.title for option in options])
        case Signature(id=signature_id):
            print("signature:", signature_id)
