"""Fill in a consent form and check whether it is complete."""

from consentdoc import ConsentDocument, PersonName, SignatureResponse

doc = ConsentDocument.from_markdown(
    "<toggle id=data-sharing expected-value=true>I agree to share my data</toggle>\n"
    "<signature id=sig />",
    initial_name=PersonName(given_name="Ada", family_name="Lovelace"),
)

print(doc.completion_state)
doc.set_value("data-sharing", True)
doc.set_value("sig", SignatureResponse(name=doc.value_for("sig").name, signature="strokes"))
print(doc.completion_state)
