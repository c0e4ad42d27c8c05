"""Parse markup and show its structure in a few lines — zero config, zero deps."""

from prettyparse import parse, pretty_print, render
from prettyparse.renderers import OutlineRenderer

source = '<p class="lead">Hello <b>world</b><br><!-- greeting --></p>'

print(OutlineRenderer().render(render(parse(source))))
print(pretty_print(source))
