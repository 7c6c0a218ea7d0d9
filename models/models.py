from dataclasses import dataclass, field
from typing import List


@dataclass
class ContextEntry:
    name: str
    active_namespace: str = ""


@dataclass
class Configuration:
    active_context: str = ""
    contexts: List[ContextEntry] = field(default_factory=list)

    def get_context(self, name: str):
        return next((ctx for ctx in self.contexts if ctx.name == name), None)


@dataclass(frozen=True)
class SelectionTarget:
    context: str
    namespace: str

    def __str__(self):
        return f"{self.context}/{self.namespace}"
