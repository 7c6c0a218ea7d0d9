import sys
from typing import List, NoReturn, Optional

from config.config_manager import ConfigManager
from core.quick_switch import QuickSwitch
from k8s.discovery import KubernetesDiscovery
from models.errors import ConfigError
from ui.tree import SelectionTree
from ui.tui import KubeHopTUI


def _fatal(error: Exception) -> NoReturn:
    print(f"❌ {error}", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    store = ConfigManager()
    try:
        configuration = store.load()
    except ConfigError as e:
        _fatal(e)

    target = QuickSwitch(store).parse(args)
    if target is not None:
        try:
            store.switch_to(target)
        except ConfigError as e:
            _fatal(e)
        return 0

    tree = SelectionTree(configuration, KubernetesDiscovery(store.path), store)
    try:
        KubeHopTUI(tree).run()
    except ConfigError as e:
        _fatal(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
