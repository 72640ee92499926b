"""Split an argument string into a preamble and prefixed values.

A prefix is recognised at the start of the string or right after whitespace, so
``find n/Alice t/friend`` yields ``{n/: ["Alice"], t/: ["friend"]}``. Text before the
first recognised prefix is the preamble. All values are trimmed.
"""

from reachbook.application.errors import MESSAGE_DUPLICATE_FIELDS, ParseError
from reachbook.application.parser.cli_syntax import Prefix


class ArgumentMultimap:
    """Prefix -> ordered list of values, plus the preamble."""

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}
        self._preamble = ""

    def put(self, prefix: Prefix | None, value: str) -> None:
        if prefix is None:
            self._preamble = value
            return
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value for prefix, or None if the prefix is absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    @property
    def preamble(self) -> str:
        return self._preamble

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise ParseError if any of the given prefixes appears more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(str(p) for p in duplicated))


def _find_prefix_positions(args: str, prefix: Prefix) -> list[int]:
    positions = []
    start = 0
    while True:
        index = args.find(prefix.prefix, start)
        if index == -1:
            return positions
        if index == 0 or args[index - 1].isspace():
            positions.append(index)
        start = index + 1


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize args on the given prefixes."""
    found: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        found.extend((pos, prefix) for pos in _find_prefix_positions(args, prefix))
    found.sort(key=lambda item: item[0])

    multimap = ArgumentMultimap()
    first = found[0][0] if found else len(args)
    multimap.put(None, args[:first].strip())
    for i, (pos, prefix) in enumerate(found):
        end = found[i + 1][0] if i + 1 < len(found) else len(args)
        multimap.put(prefix, args[pos + len(prefix.prefix):end].strip())
    return multimap
