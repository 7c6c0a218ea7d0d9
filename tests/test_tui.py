import pytest

from models.errors import ListError, ListErrorKind
from models.models import Configuration, ContextEntry, SelectionTarget
from ui import tui as tui_module
from ui.tree import SelectionTree
from ui.tui import KubeHopTUI


class FakeLister:
    def list_namespaces(self, context):
        if context == "lab":
            raise ListError(ListErrorKind.UNREACHABLE)
        return ["default", "kube-system"]


class FakeStore:
    def __init__(self):
        self.targets = []

    def switch_to(self, target):
        self.targets.append(target)


def scripted_input(*answers):
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(tui_module.time, "sleep", lambda seconds: None)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def tree(store):
    configuration = Configuration("dev", [ContextEntry("dev", "default"), ContextEntry("lab", "")])
    return SelectionTree(configuration, FakeLister(), store)


def test_expand_then_select_namespace(tree, store, capsys):
    tui = KubeHopTUI(tree, input_func=scripted_input("1", "3"), clear_screen=False)

    assert tui.run() is True
    assert store.targets == [SelectionTarget("dev", "kube-system")]
    assert "dev (active)" in capsys.readouterr().out


def test_quit_without_switch(tree, store):
    tui = KubeHopTUI(tree, input_func=scripted_input("q"), clear_screen=False)

    assert tui.run() is False
    assert store.targets == []


def test_end_of_input_exits(tree, store):
    tui = KubeHopTUI(tree, input_func=scripted_input(), clear_screen=False)

    assert tui.run() is False


def test_invalid_choice_keeps_running(tree, store, capsys):
    tui = KubeHopTUI(tree, input_func=scripted_input("9", "abc", "quit"), clear_screen=False)

    assert tui.run() is False
    assert capsys.readouterr().out.count("❌ Invalid choice") == 2


def test_listing_error_is_shown_inline(tree, store, capsys):
    tui = KubeHopTUI(tree, input_func=scripted_input("2", "q"), clear_screen=False)

    tui.run()

    assert "lab (unreachable)" in capsys.readouterr().out
    assert store.targets == []


def test_no_contexts(store):
    tree = SelectionTree(Configuration("", []), FakeLister(), store)

    assert KubeHopTUI(tree, input_func=scripted_input("1"), clear_screen=False).run() is False
