import pytest

SAMPLE_KUBECONFIG = """\
apiVersion: v1
kind: Config
preferences: {}
clusters:
- name: dev-cluster
  cluster:
    server: https://dev.example.com:6443
    certificate-authority-data: Q0VSVA==
- name: prod-cluster
  cluster:
    server: https://prod.example.com:6443
users:
- name: dev-user
  user:
    token: dev-token
- name: prod-user
  user:
    client-certificate-data: Q0VSVA==
    client-key-data: S0VZ
contexts:
- name: dev
  context:
    cluster: dev-cluster
    user: dev-user
    namespace: default
- name: prod
  context:
    cluster: prod-cluster
    user: prod-user
    namespace: payments
- name: bare
  context:
    cluster: dev-cluster
    user: dev-user
current-context: dev
"""


@pytest.fixture
def kubeconfig(tmp_path):
    path = tmp_path / "config"
    path.write_text(SAMPLE_KUBECONFIG, encoding="utf-8")
    return path
