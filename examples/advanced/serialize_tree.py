"""Hand a presentation tree to a front end as JSON."""

from prettyparse import parse, render
from prettyparse.serialization import from_json, to_json

tree = render(parse('<ul><li>one<li data-x=1>two</ul>'))

json_str = to_json(tree, indent=2)
restored = from_json(json_str)

print("Original == restored:", tree == restored)
print(json_str)
