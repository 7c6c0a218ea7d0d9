import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from models.errors import ConfigError, ConfigErrorKind
from models.models import Configuration, ContextEntry, SelectionTarget


class ConfigManager:
    ENV_VAR = "KUBECONFIG"
    DEFAULT_PATH = "~/.kube/config"

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else self.get_config_path()
        self.configuration: Optional[Configuration] = None

    @staticmethod
    def _log_console(message):
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{timestamp}] {message}")

    @staticmethod
    def get_config_path() -> Path:
        env_value = os.environ.get(ConfigManager.ENV_VAR, "")
        for entry in env_value.split(os.pathsep):
            if entry.strip():
                return Path(entry.strip()).expanduser()
        return Path(ConfigManager.DEFAULT_PATH).expanduser()

    def _read_raw(self) -> dict:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(ConfigErrorKind.IO_FAILURE, f"cannot read {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, f"{self.path} is not valid UTF-8: {e}") from e

        if len(content) == 0:
            raise ConfigError(ConfigErrorKind.EMPTY_FILE, f"empty configuration file: {self.path}")

        try:
            raw = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, f"cannot parse {self.path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, f"{self.path} is not a mapping")
        return raw

    @staticmethod
    def parse(raw: dict) -> Configuration:
        """Build a Configuration from a raw kubeconfig mapping.

        Only ``current-context`` and ``contexts[].name`` / ``contexts[].context.namespace``
        are read; everything else is ignored here and left alone on rewrite.
        """
        active_context = raw.get('current-context') or ""
        contexts_data = raw.get('contexts') or []
        if not isinstance(active_context, str):
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, "current-context must be a string")
        if not isinstance(contexts_data, list):
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, "contexts must be a list")

        contexts = []
        for context_data in contexts_data:
            if not isinstance(context_data, dict) or not isinstance(context_data.get('name'), str):
                raise ConfigError(ConfigErrorKind.PARSE_FAILURE, f"invalid context entry: {context_data!r}")
            attributes = context_data.get('context') or {}
            if not isinstance(attributes, dict):
                raise ConfigError(ConfigErrorKind.PARSE_FAILURE,
                                  f"context {context_data['name']} has invalid attributes")
            namespace = attributes.get('namespace') or ""
            contexts.append(ContextEntry(name=context_data['name'], active_namespace=str(namespace)))

        return Configuration(active_context=active_context, contexts=contexts)

    def load(self) -> Configuration:
        self._log_console(f"🔍 Loading configuration from: {self.path}")
        self.configuration = self.parse(self._read_raw())
        self._log_console(f"✅ Loaded configuration with {len(self.configuration.contexts)} contexts")
        return self.configuration

    def context_exists(self, name: str) -> bool:
        if self.configuration is None or not name:
            return False
        return self.configuration.get_context(name) is not None

    def switch_to(self, target: SelectionTarget):
        # Re-read from disk so edits made since startup are not overwritten.
        raw = self._read_raw()

        contexts_data = raw.get('contexts') or []
        if not isinstance(contexts_data, list):
            raise ConfigError(ConfigErrorKind.PARSE_FAILURE, "contexts must be a list")
        context_data = next((c for c in contexts_data
                             if isinstance(c, dict) and c.get('name') == target.context), None)
        if context_data is None:
            raise ConfigError(ConfigErrorKind.CONTEXT_NOT_FOUND, f"context not found: {target.context}")

        if not isinstance(context_data.get('context'), dict):
            context_data['context'] = {}
        context_data['context']['namespace'] = target.namespace
        raw['current-context'] = target.context

        self._write_raw(raw)

        if self.configuration is not None:
            self.configuration.active_context = target.context
            entry = self.configuration.get_context(target.context)
            if entry is not None:
                entry.active_namespace = target.namespace

        self._log_console(f"💾 switched to {target}")

    def _write_raw(self, raw: dict):
        # Write through symlinks so the file they point to is the one updated.
        target = self.path.resolve()
        try:
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    yaml.safe_dump(raw, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
                shutil.copymode(target, tmp_name)
                os.replace(tmp_name, target)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise ConfigError(ConfigErrorKind.IO_FAILURE, f"cannot write {self.path}: {e}") from e

