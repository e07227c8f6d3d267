"""Cache a parsed consent form to disk as JSON and load it back."""

from consentdoc import parse
from consentdoc.serialization import from_json, to_json

result = parse("Please confirm.\n<toggle id=confirm expected-value=true>I confirm</toggle>")

json_str = to_json(result)
restored = from_json(json_str)

print("Original == restored:", result == restored)
print("JSON length:", len(json_str), "chars")
