from collections.abc import Callable
from gettext import NullTranslations


Translate = Callable[[str], str]

# Message ids looked up by the renderer and the window builder.
HOURS = "Hours"
PREVIOUS = "previous"
NEXT = "next"
TWENTY_FOUR_HOURS = "24 hours"
CLOSED = "closed"
NOT_AVAILABLE = "n/a"

default_translate: Translate = NullTranslations().gettext
