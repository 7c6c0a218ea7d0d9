from typing import List, Optional

from models.models import SelectionTarget

SEPARATOR = "/"


class QuickSwitch:
    """Turns positional arguments into a switch target without opening the tree.

    Recognised shapes::

        <namespace>              namespace in the active context
        <context>/<namespace>    context must exist
        <context> <namespace>    context must exist

    Anything else returns None and the caller falls back to the interactive tree.
    """

    def __init__(self, store):
        self.store = store

    def parse(self, args: List[str]) -> Optional[SelectionTarget]:
        if len(args) == 1:
            parts = args[0].split(SEPARATOR)
            if len(parts) == 1:
                return SelectionTarget(context=self.store.configuration.active_context, namespace=parts[0])
            if len(parts) == 2 and all(parts) and self.store.context_exists(parts[0]):
                return SelectionTarget(context=parts[0], namespace=parts[1])
            return None

        if len(args) == 2 and self.store.context_exists(args[0]):
            return SelectionTarget(context=args[0], namespace=args[1])

        return None
