# shorthand/engine.py
from __future__ import annotations

import os
import logging
from typing import List, Optional

from . import config as CFG
from .dictionary import CommandDictionary, default_dictionary
from .loader import load_dictionary
from .models import RankedCandidate
from .parser import parse_command_to_latex
from .ranker import filter_commands

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer used by the CLI and the Flask app:
      - dictionary selection (built-in table or a JSON file),
      - shorthand -> LaTeX conversion (parser.parse_command_to_latex),
      - palette ranking (ranker.filter_commands).

    Public API:
      * load(path=None):        pick the dictionary and compile its tables
      * parse(text):            LaTeX for a shorthand string
      * complete(prefix, top_k): ranked palette rows
      * shutdown():             drop the dictionary
    """

    # ------------- lifecycle -------------

    def __init__(self, dictionary: Optional[CommandDictionary] = None) -> None:
        self.dictionary: Optional[CommandDictionary] = dictionary

    # /* ~~~ Choose a dictionary: explicit path > $SHORTHAND_DICT > built-in ~~~ */
    def load(self, path: Optional[str] = None, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        path = path or os.environ.get(CFG.DICT_ENV_VAR) or None
        if path:
            self.dictionary = load_dictionary(path)
        else:
            log.info("Using built-in dictionary")
            self.dictionary = default_dictionary()

        # compile once up front so the first keystroke does not pay for it
        cmds, tmpls = self.dictionary.tables
        log.info("Engine load() complete: command patterns=%d template patterns=%d",
                 len(cmds), len(tmpls))

    # ------------- query -------------

    def parse(self, text: str) -> str:
        return parse_command_to_latex(text, self._require())

    def complete(self, prefix: str, *, top_k: Optional[int] = CFG.TOP_K) -> List[RankedCandidate]:
        rows = filter_commands(self._require(), prefix)
        return rows if top_k is None else rows[:top_k]

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.dictionary = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> CommandDictionary:
        if self.dictionary is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        return self.dictionary
