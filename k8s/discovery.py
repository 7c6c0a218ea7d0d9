from datetime import datetime
from typing import List, Optional

import urllib3
from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

from models.errors import ListError, ListErrorKind

REQUEST_TIMEOUT = 0.5


class KubernetesDiscovery:
    def __init__(self, config_file: Optional[str] = None, timeout: float = REQUEST_TIMEOUT):
        self.config_file = str(config_file) if config_file is not None else None
        self.timeout = timeout

    @staticmethod
    def _log_console(message):
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{timestamp}] {message}")

    def _build_api_client(self, context: str) -> client.ApiClient:
        configuration = client.Configuration()
        try:
            config.load_kube_config(
                config_file=self.config_file,
                context=context,
                client_configuration=configuration,
                persist_config=False,
            )
        except ConfigException as e:
            raise ListError(ListErrorKind.CONFIG_INVALID, str(e)) from e
        except (TypeError, ValueError, KeyError) as e:
            raise ListError(ListErrorKind.CONFIG_INVALID, str(e)) from e
        # One attempt per expansion; the user retries by expanding again.
        configuration.retries = 0
        return client.ApiClient(configuration=configuration)

    @staticmethod
    def _api_error_detail(error: ApiException) -> str:
        if error.body:
            body = error.body.decode('utf-8', 'replace') if isinstance(error.body, bytes) else str(error.body)
            return f"({error.status}) {error.reason}: {body.strip()}"
        return f"({error.status}) {error.reason}"

    def list_namespaces(self, context: str) -> List[str]:
        self._log_console(f"🔍 Discovering namespaces in context: {context}")
        try:
            api_client = self._build_api_client(context)
        except ListError as e:
            self._log_console(f"   ❌ Invalid client configuration for context {context}: {e.detail}")
            raise

        try:
            response = client.CoreV1Api(api_client).list_namespace(_request_timeout=self.timeout)
        except ApiException as e:
            self._log_console(f"   ❌ API rejected namespace list for {context}: {e.reason}")
            raise ListError(ListErrorKind.API_ERROR, self._api_error_detail(e)) from e
        except (urllib3.exceptions.HTTPError, OSError) as e:
            self._log_console(f"   ❌ Cluster for context {context} is unreachable: {e}")
            raise ListError(ListErrorKind.UNREACHABLE, str(e)) from e
        except Exception as e:
            self._log_console(f"   ❌ Failed to get namespaces: {e}")
            raise ListError(ListErrorKind.UNKNOWN, str(e)) from e
        finally:
            api_client.close()

        namespaces = [item.metadata.name for item in response.items]
        self._log_console(f"   Found {len(namespaces)} namespaces")
        return namespaces
