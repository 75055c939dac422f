from __future__ import annotations
import os

# /* ~~~ search behaviour ~~~ */
FUZZY_ENABLED: bool = False   # translate the wildcard marker into "any characters"
WILDCARD: str = "*"
MAX_CANDIDATES: int = 20

# /* ~~~ dictionary files ~~~ */
DICT_DIR: str = os.path.expanduser(os.environ.get("DICTCOMPLETE_DIR", "~/.dictcomplete/dict"))
ALL_SOURCE: str = "all"       # merged into every context
FIELD_SEP: str = "\t"         # label<TAB>annotation<TAB>meta
ENCODING: str = "utf-8"

# expand accepted candidates written in snippet syntax
SNIPPETS_ENABLED: bool = False

# INFO logging for every Engine (same as verbose=True)
VERBOSE: bool = os.environ.get("DICTCOMPLETE_VERBOSE") == "1"
