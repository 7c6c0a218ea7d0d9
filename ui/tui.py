import os
import time
from datetime import datetime
from typing import List

from ui.tree import ContextMarker, ContextNode, NamespaceMarker, NamespaceNode, SelectionTree, TreeSignal

GREEN = "\033[32m"
RED = "\033[31m"
CYAN = "\033[36m"
RESET = "\033[0m"


class KubeHopTUI:
    def __init__(self, tree: SelectionTree, input_func=input, clear_screen=True):
        self.tree = tree
        self.input_func = input_func
        self.clear_screen = clear_screen
        self.running = True
        self.switched = False

    @staticmethod
    def _log_console(message):
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{timestamp}] {message}")

    @staticmethod
    def _colorize(node) -> str:
        if isinstance(node, ContextNode):
            if node.marker == ContextMarker.ERROR:
                return f"{RED}{node.label}{RESET}"
            if node.marker == ContextMarker.ACTIVE:
                return f"{GREEN}{node.label}{RESET}"
            if node.expanded:
                return f"{CYAN}{node.label}{RESET}"
            return node.label
        if isinstance(node, NamespaceNode) and node.marker == NamespaceMarker.ACTIVE:
            return f"{GREEN}{node.label}{RESET}"
        return node.label

    def show_tree(self) -> List:
        if self.clear_screen:
            os.system('cls' if os.name == 'nt' else 'clear')

        rows = []
        for depth, node in self.tree.visible_rows():
            marker = "👉 " if node is self.tree.highlighted else "   "
            if depth == 0:
                print(f"\n🌍 {node.label}")
                print("-" * 40)
                continue
            rows.append(node)
            indent = "    " * (depth - 1)
            icon = ("▾ " if node.expanded else "▸ ") if isinstance(node, ContextNode) else "• "
            print(f"{marker}{len(rows):2d}. {indent}{icon}{self._colorize(node)}")

        print("\n🎮 Commands:")
        print("  1-N      : Expand/collapse context or switch to namespace")
        print("  quit     : Quit")
        return rows

    def handle_choice(self, choice: str, rows: List):
        choice = (choice or "").strip().lower()

        if choice in ('q', 'quit'):
            self.running = False
            return

        if choice.isdigit():
            index = int(choice) - 1
            if 0 <= index < len(rows):
                if self.tree.activate(rows[index]) == TreeSignal.SESSION_COMPLETE:
                    self.switched = True
                    self.running = False
                return

        print("❌ Invalid choice")
        time.sleep(1)

    def run(self) -> bool:
        """Run until a namespace is chosen or the user quits. Returns True if a switch happened."""
        if not self.tree.context_nodes:
            print("❌ No contexts configured.")
            return False

        while self.running:
            rows = self.show_tree()
            try:
                choice = self.input_func("\nSelect: ")
            except (EOFError, KeyboardInterrupt):
                print("\n👋 Goodbye!")
                break
            self.handle_choice(choice, rows)

        return self.switched
