from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from models.errors import ListError
from models.models import Configuration, ContextEntry, SelectionTarget


class ContextMarker(Enum):
    NORMAL = "normal"
    ACTIVE = "active"
    ERROR = "error"


class NamespaceMarker(Enum):
    NORMAL = "normal"
    ACTIVE = "active"


class TreeSignal(Enum):
    CONTINUE = "continue"
    SESSION_COMPLETE = "session complete"


@dataclass(eq=False)
class NamespaceNode:
    context: str
    name: str
    marker: NamespaceMarker = NamespaceMarker.NORMAL

    @property
    def label(self) -> str:
        return self.name


@dataclass(eq=False)
class ContextNode:
    entry: ContextEntry
    is_active: bool = False
    marker: ContextMarker = ContextMarker.NORMAL
    children: List[NamespaceNode] = field(default_factory=list)
    expanded: bool = False
    populated: bool = False
    error: Optional[str] = None

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def label(self) -> str:
        if self.marker == ContextMarker.ERROR:
            return f"{self.name} ({self.error})"
        if self.marker == ContextMarker.ACTIVE:
            return f"{self.name} (active)"
        return self.name


@dataclass(eq=False)
class RootNode:
    label: str = "Contexts"
    children: List[ContextNode] = field(default_factory=list)


TreeNode = Union[RootNode, ContextNode, NamespaceNode]


class SelectionTree:
    """Contexts and their lazily fetched namespaces.

    At most one context is expanded at a time and exactly one node is
    highlighted. ``lister`` must provide ``list_namespaces(context) -> List[str]``
    raising ``ListError``; ``store`` must provide ``switch_to(SelectionTarget)``.
    """

    def __init__(self, configuration: Configuration, lister, store):
        self.configuration = configuration
        self.lister = lister
        self.store = store
        self.root = RootNode()
        for entry in configuration.contexts:
            is_active = entry.name == configuration.active_context
            marker = ContextMarker.ACTIVE if is_active else ContextMarker.NORMAL
            self.root.children.append(ContextNode(entry=entry, is_active=is_active, marker=marker))
        self.expanded_node: Optional[ContextNode] = None
        self.highlighted: TreeNode = self.root

    @property
    def context_nodes(self) -> List[ContextNode]:
        return self.root.children

    def find_context(self, name: str) -> Optional[ContextNode]:
        return next((node for node in self.root.children if node.name == name), None)

    def highlight(self, node: TreeNode):
        self.highlighted = node

    def _expand(self, node: ContextNode):
        if self.expanded_node is not None and self.expanded_node is not node:
            self._collapse(self.expanded_node)
        node.expanded = True
        self.expanded_node = node

    def _collapse(self, node: ContextNode):
        node.expanded = False
        if self.expanded_node is node:
            self.expanded_node = None
        if self.highlighted in node.children:
            self.highlighted = node

    def _populate(self, node: ContextNode, namespaces: List[str]):
        for namespace in namespaces:
            child = NamespaceNode(context=node.name, name=namespace)
            if namespace == node.entry.active_namespace:
                child.marker = NamespaceMarker.ACTIVE
                self.highlighted = child
            node.children.append(child)
        node.populated = True

    def toggle_expand(self, node: ContextNode) -> TreeSignal:
        if node.populated:
            if node.expanded:
                self._collapse(node)
            else:
                self._expand(node)
            return TreeSignal.CONTINUE

        self._expand(node)
        try:
            namespaces = self.lister.list_namespaces(node.name)
        except ListError as e:
            node.marker = ContextMarker.ERROR
            node.error = e.message
            return TreeSignal.CONTINUE

        node.error = None
        node.marker = ContextMarker.ACTIVE if node.is_active else ContextMarker.NORMAL
        self._populate(node, namespaces)
        return TreeSignal.CONTINUE

    def select(self, node: NamespaceNode) -> TreeSignal:
        self.store.switch_to(SelectionTarget(context=node.context, namespace=node.name))
        return TreeSignal.SESSION_COMPLETE

    def activate(self, node: TreeNode) -> TreeSignal:
        if isinstance(node, NamespaceNode):
            return self.select(node)
        if isinstance(node, ContextNode):
            self.highlighted = node
            return self.toggle_expand(node)
        return TreeSignal.CONTINUE

    def visible_rows(self) -> Iterator[Tuple[int, TreeNode]]:
        yield 0, self.root
        for context_node in self.root.children:
            yield 1, context_node
            if context_node.expanded:
                for namespace_node in context_node.children:
                    yield 2, namespace_node
